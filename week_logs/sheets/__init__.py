from .client import GoogleSheetsClient
from .models import Cell, CredentialsType, Row, ValueRenderOption


__all__ = [
    "Cell",
    "CredentialsType",
    "GoogleSheetsClient",
    "Row",
    "ValueRenderOption",
]
