"""Report configuration loaded from a JSON file.

Example::

    {
        "language": "en",
        "name": "Jane Doe",
        "result": "week-%02d.pdf",
        "company": {"name": "ACME", "leader": "John Roe"},
        "sheet": {
            "id": "1AbC...",
            "selection": "Logs!A2:D",
            "columns": ["Day", "Description", "Particularities", "Duration"]
        }
    }
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_CREDENTIALS_PATH = "credentials.json"
DEFAULT_CONVERTER = "wkhtmltopdf"
BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "reports" / "templates"


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    leader: str


class Sheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    selection: str
    columns: tuple[str, ...]


class Config(BaseModel):
    """Settings shared by every stage of a report run"""

    model_config = ConfigDict(frozen=True)

    language: str
    name: str
    result: str
    company: Company
    sheet: Sheet
    templates: Optional[Path] = None
    converter: str = DEFAULT_CONVERTER

    @field_validator("result")
    @classmethod
    def _result_has_week_placeholder(cls, value: str) -> str:
        try:
            value % 1
        except (TypeError, ValueError) as e:
            raise ValueError(f"result {value!r} must contain exactly one integer placeholder: {e}") from e
        return value

    @property
    def templates_dir(self) -> Path:
        return self.templates or BUNDLED_TEMPLATES_DIR

    def result_path(self, week: int) -> str:
        """Output filename for a week, e.g. "week-%02d.pdf" -> "week-03.pdf" """
        return self.result % week


def config_path_from_env() -> str:
    return os.getenv("WEEK_LOGS_CONFIG", DEFAULT_CONFIG_PATH)


def credentials_path_from_env() -> str:
    return os.getenv("GOOGLE_CREDENTIALS", DEFAULT_CREDENTIALS_PATH)


def load_config(path: str | Path) -> Config:
    """Read and validate the configuration file"""
    try:
        with open(path, encoding="utf-8") as config_file:
            raw = json.load(config_file)
    except OSError as e:
        raise ConfigError(f"Unable to read the config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Unable to parse the config file {path}: {e}") from e

    try:
        config = Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    logger.info(f"Loaded config from {path} (language={config.language})")
    return config
