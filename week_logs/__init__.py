"""Week Logs - weekly PDF reports from a time-tracking spreadsheet.

This package reads log rows from Google Sheets, groups them by ISO week and
renders each week through a Jinja2 template into a PDF.
"""

__version__ = "0.1.0"

from .config import Config, load_config
from .logs import Log, group_by_week, new_log
from .pipeline import ReportPipeline
from .reports import ReportRenderer, TemplateData, convert_to_pdf
from .sheets.client import GoogleSheetsClient


__all__ = [
    "Config",
    "GoogleSheetsClient",
    "Log",
    "ReportPipeline",
    "ReportRenderer",
    "TemplateData",
    "convert_to_pdf",
    "group_by_week",
    "load_config",
    "new_log",
]
