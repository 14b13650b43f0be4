"""Google Sheets API sink."""

from typing import Any, Optional

from googleapiclient.errors import HttpError
from starlette.concurrency import run_in_threadpool

from .base import FIELDS, SinkError, WaitlistSink
from models.waitlist import WaitlistEntry

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def build_sheets_service(credentials_file: str):
    """Build a Sheets v4 client from a service-account key file."""
    from google.oauth2.service_account import Credentials
    from googleapiclient.discovery import build

    creds = Credentials.from_service_account_file(credentials_file, scopes=SCOPES)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


class GoogleSheetsSink(WaitlistSink):
    name = "google"

    def __init__(
        self,
        spreadsheet_id: Optional[str],
        range_name: str = "Sheet1!A:D",
        credentials_file: Optional[str] = None,
        service: Any = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.range_name = range_name
        self.credentials_file = credentials_file
        self._service = service

    def _values(self):
        if self._service is None:
            if not self.spreadsheet_id or not self.credentials_file:
                raise SinkError("Google Sheets sink is not configured")
            try:
                self._service = build_sheets_service(self.credentials_file)
            except (OSError, ValueError) as e:
                raise SinkError(f"Google credentials unusable: {e}") from e
        return self._service.spreadsheets().values()

    def _append_sync(self, entry: WaitlistEntry) -> None:
        self._values().append(
            spreadsheetId=self.spreadsheet_id,
            range=self.range_name,
            valueInputOption="RAW",
            insertDataOption="INSERT_ROWS",
            body={"values": [entry.as_row()]},
        ).execute()

    def _read_sync(self) -> list[list[str]]:
        result = self._values().get(
            spreadsheetId=self.spreadsheet_id,
            range=self.range_name,
        ).execute()
        return result.get("values", [])

    async def append(self, entry: WaitlistEntry) -> None:
        try:
            await run_in_threadpool(self._append_sync, entry)
        except SinkError:
            raise
        except HttpError as e:
            raise SinkError(f"Google Sheets append failed: {e.resp.status}") from e
        except Exception as e:
            raise SinkError(f"Google Sheets unreachable: {e}") from e

    async def list_entries(self) -> list[dict[str, Any]]:
        try:
            rows = await run_in_threadpool(self._read_sync)
        except SinkError:
            raise
        except HttpError as e:
            raise SinkError(f"Google Sheets read failed: {e.resp.status}") from e
        except Exception as e:
            raise SinkError(f"Google Sheets unreachable: {e}") from e

        # Skip a header row such as "Timestamp | Name | Company | Email"
        if rows and [c.strip().lower() for c in rows[0]] == list(FIELDS):
            rows = rows[1:]

        return [dict(zip(FIELDS, row)) for row in rows if row]
