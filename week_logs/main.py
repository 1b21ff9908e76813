import logging
import sys

from dotenv import load_dotenv

from .config import config_path_from_env, credentials_path_from_env, load_config
from .errors import WeekLogsError
from .logging_config import setup_logging
from .pipeline import ReportPipeline
from .reports import ReportRenderer
from .sheets import GoogleSheetsClient

logger = logging.getLogger(__name__)


def main() -> None:
    """Build one PDF per ISO week from the configured sheet"""
    load_dotenv()
    setup_logging()
    logger.info("Starting week logs report run")

    stage = "load config"
    try:
        config = load_config(config_path_from_env())

        stage = "authenticate"
        sheets_client = GoogleSheetsClient(
            spreadsheet_id=config.sheet.id,
            credentials_path=credentials_path_from_env(),
        )

        renderer = ReportRenderer(config.templates_dir, config.language)
        pipeline = ReportPipeline(config, sheets_client, renderer)
        stage = None
        written = pipeline.run()
    except WeekLogsError as e:
        logger.error(f"Unable to {stage or pipeline.stage}. {e}")
        sys.exit(1)

    for path in written:
        logger.info(f"Wrote {path}")


if __name__ == "__main__":
    main()
