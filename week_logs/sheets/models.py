# week_logs/sheets/models.py
from enum import Enum

# A cell as returned by the Sheets API. Text is the only kind a log row accepts.
Cell = str | int | float | bool | None

Row = list[Cell]


class CredentialsType(Enum):
    """Kinds of credential files the sheets client can authorize with"""

    SERVICE_ACCOUNT = "service_account"
    AUTHORIZED_USER = "authorized_user"


class ValueRenderOption(Enum):
    """How the Sheets API should render cell values"""

    FORMATTED = "FORMATTED_VALUE"
    UNFORMATTED = "UNFORMATTED_VALUE"
    FORMULA = "FORMULA"
