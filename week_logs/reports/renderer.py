import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from jinja2 import TemplateError as JinjaTemplateError

from ..config import Company
from ..errors import TemplateError
from ..logs import Log

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateData:
    """Everything a report template sees for one week"""

    name: str
    week: int
    logs: tuple[Log, ...]
    company: Company
    columns: tuple[str, ...]

    @property
    def total(self) -> timedelta:
        return sum((log.duration for log in self.logs), timedelta(0))


def format_date(pattern: str, value: date) -> str:
    """Format a day with a strftime pattern, e.g. date("%d.%m.%Y", log.day)"""
    return value.strftime(pattern)


def format_minutes(duration: timedelta) -> str:
    """Render a duration as minutes: 2h30m -> "150min", 90.5 minutes -> "90.5min" """
    minutes = duration.total_seconds() / 60
    if minutes.is_integer():
        return f"{int(minutes)}min"
    return f"{minutes!r}min"


class ReportRenderer:
    """Renders weekly reports through a per-language Jinja2 template"""

    def __init__(self, templates_dir: Path, language: str):
        self.templates_dir = Path(templates_dir)
        self.language = language
        self.env = self._get_template_env()
        self._template: Optional[Template] = None

    def _get_template_env(self) -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.globals["date"] = format_date
        env.globals["minutes"] = format_minutes
        env.filters["date"] = lambda value, pattern: format_date(pattern, value)
        env.filters["minutes"] = format_minutes
        return env

    @property
    def template_name(self) -> str:
        return f"{self.language}.html"

    def load(self) -> Template:
        """Resolve and parse the template for the configured language"""
        if self._template is None:
            try:
                self._template = self.env.get_template(self.template_name)
            except JinjaTemplateError as e:
                logger.error(f"Failed to load template {self.template_name} from {self.templates_dir}: {e}")
                raise TemplateError(f"Unable to load template {self.template_name}: {e}") from e
            logger.info(f"Loaded template {self.template_name}")
        return self._template

    def render(self, data: TemplateData) -> str:
        template = self.load()
        try:
            return template.render(
                name=data.name,
                week=data.week,
                logs=data.logs,
                company=data.company,
                columns=data.columns,
                total=data.total,
            )
        except (JinjaTemplateError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to render week {data.week}: {e}")
            raise TemplateError(f"Unable to render week {data.week}: {e}") from e
