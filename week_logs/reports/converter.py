import logging
import subprocess
from pathlib import Path

from ..config import DEFAULT_CONVERTER
from ..errors import ConversionError

logger = logging.getLogger(__name__)


def convert_to_pdf(html: str, destination: str | Path, executable: str = DEFAULT_CONVERTER) -> Path:
    """Convert rendered HTML into a PDF file

    The HTML is piped to the converter's stdin ("-") and the converter writes
    the destination file itself. Its stdout is left attached to ours.
    """
    destination = Path(destination)
    command = [executable, "-", str(destination)]
    logger.info(f"Converting to {destination} with {executable}")

    try:
        with subprocess.Popen(command, stdin=subprocess.PIPE) as process:
            process.communicate(html.encode("utf-8"))
    except OSError as e:
        logger.error(f"Could not run {executable}: {e}")
        raise ConversionError(f"Unable to start {executable}: {e}") from e

    if process.returncode != 0:
        logger.error(f"{executable} exited with status {process.returncode}")
        raise ConversionError(f"Unable to render pdf {destination}: {executable} exited with status {process.returncode}")

    return destination
