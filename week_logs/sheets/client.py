import json
import logging
from typing import List

from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account
from googleapiclient.discovery import build

from ..errors import AuthError, SheetError
from .models import CredentialsType, Row, ValueRenderOption

logger = logging.getLogger(__name__)


class GoogleSheetsClient:
    """Reads time-tracking rows from a Google spreadsheet"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_path: str,
        service=None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_path = credentials_path
        self.service = service or self._build_sheets_service()

    def _load_credentials(self):
        """Load service-account or authorized-user credentials from disk"""
        with open(self.credentials_path, encoding="utf-8") as credentials_file:
            info = json.load(credentials_file)

        credentials_type = CredentialsType(info.get("type"))
        if credentials_type is CredentialsType.SERVICE_ACCOUNT:
            return service_account.Credentials.from_service_account_info(info, scopes=self.SCOPES)
        return user_credentials.Credentials.from_authorized_user_info(info, scopes=self.SCOPES)

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = self._load_credentials()
            return build("sheets", "v4", credentials=creds, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise AuthError(f"Could not initialize sheets service: {str(e)}") from e

    def get_rows(
        self,
        selection: str,
        render_option: ValueRenderOption = ValueRenderOption.FORMATTED,
    ) -> List[Row]:
        """Fetch the rows of a range such as "Logs!A2:D"

        Trailing empty cells are omitted by the API, so rows may be shorter
        than the selection is wide.
        """
        logger.info(f"Fetching rows {selection} from spreadsheet {self.spreadsheet_id}")
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(
                    spreadsheetId=self.spreadsheet_id,
                    range=selection,
                    valueRenderOption=render_option.value,
                )
                .execute()
            )
        except Exception as e:
            logger.error(f"Error reading rows: {e}")
            raise SheetError(f"Failed to read {selection}: {str(e)}") from e

        rows = result.get("values", [])
        logger.info(f"Fetched {len(rows)} rows")
        return rows

