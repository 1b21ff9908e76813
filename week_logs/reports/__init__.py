from .converter import convert_to_pdf
from .renderer import ReportRenderer, TemplateData, format_date, format_minutes


__all__ = [
    "ReportRenderer",
    "TemplateData",
    "convert_to_pdf",
    "format_date",
    "format_minutes",
]
