import logging
from collections.abc import Callable
from pathlib import Path
from typing import List

from .config import Config
from .logs import WeekBucket, group_by_week
from .reports import ReportRenderer, TemplateData, convert_to_pdf
from .sheets import GoogleSheetsClient

logger = logging.getLogger(__name__)

Converter = Callable[[str, str | Path, str], Path]


class ReportPipeline:
    """Turns the configured sheet into one PDF per ISO week"""

    def __init__(
        self,
        config: Config,
        sheets_client: GoogleSheetsClient,
        renderer: ReportRenderer,
        convert: Converter = convert_to_pdf,
    ):
        self.config = config
        self.sheets_client = sheets_client
        self.renderer = renderer
        self.convert = convert
        self.stage = "fetch and group logs"

    def collect_logs(self) -> WeekBucket:
        """Fetch the configured range and group its rows by week"""
        rows = self.sheets_client.get_rows(self.config.sheet.selection)
        return group_by_week(rows)

    def template_data(self, week: int, logs) -> TemplateData:
        return TemplateData(
            name=self.config.name,
            week=week,
            logs=tuple(logs),
            company=self.config.company,
            columns=self.config.sheet.columns,
        )

    def render_week(self, week: int, logs) -> Path:
        html = self.renderer.render(self.template_data(week, logs))
        return self.convert(html, self.config.result_path(week), self.config.converter)

    def run(self) -> List[Path]:
        """Render and convert every week; the first failure aborts the run

        PDFs written before a failing week are left in place. `stage` names the
        step that was running when an error escaped.
        """
        self.stage = "fetch and group logs"
        weeks = self.collect_logs()

        self.stage = "load template"
        self.renderer.load()

        written = []
        for week in sorted(weeks):
            self.stage = f"render week {week}"
            logger.info(f"Rendering week {week} ({len(weeks[week])} logs)")
            written.append(self.render_week(week, weeks[week]))

        logger.info(f"Wrote {len(written)} reports")
        return written
