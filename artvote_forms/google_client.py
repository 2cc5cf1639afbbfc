from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .paths import AppPaths

# If modifying these scopes, delete the previously saved token.json.
SCOPES = [
    "https://www.googleapis.com/auth/drive",
]

FILE_LIST_FIELDS = "nextPageToken, files(id, name)"


class GoogleClientError(RuntimeError):
    pass


def _ensure_dependencies() -> None:
    try:
        import googleapiclient  # noqa: F401
        import google_auth_oauthlib  # noqa: F401
    except ImportError as exc:
        raise GoogleClientError(
            "Missing Google API dependencies. Install them with:\n"
            "  pip install google-api-python-client google-auth google-auth-oauthlib"
        ) from exc


def response_sheet_query(number: int) -> str:
    return (
        f"name contains '{number} (Responses)' and not name contains 'File' "
        f"or name contains '{number} (Risposte)' and not name contains 'File'"
    )


def contest_folder_query(number: int) -> str:
    return f"name contains 'Contest #{number}' and not name contains 'Art'"


@dataclass
class DriveClient:
    service: "googleapiclient.discovery.Resource"

    def find_files(self, query: str) -> List[Dict[str, str]]:
        try:
            result = (
                self.service.files()
                .list(q=query, pageSize=10, fields=FILE_LIST_FIELDS)
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(f"Failed to list files: {exc}") from exc
        return result.get("files", [])

    def find_first(self, query: str, what: str) -> Dict[str, str]:
        files = self.find_files(query)
        if not files:
            raise GoogleClientError(f"Unable to find {what}.")
        return files[0]

    def get_image_links(self, file_id: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Return (webContentLink, thumbnailLink) for an uploaded image.

        Both fields are fetched in one metadata request. The form builder
        only uses the thumbnail for the checkbox option images.
        """
        try:
            meta = (
                self.service.files()
                .get(fileId=file_id, fields="webContentLink, thumbnailLink")
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(f"Unable to get image {file_id}: {exc}") from exc
        return meta.get("webContentLink"), meta.get("thumbnailLink")

    def download(self, file_id: str) -> bytes:
        from googleapiclient.http import MediaIoBaseDownload

        buffer = io.BytesIO()
        try:
            request = self.service.files().get_media(fileId=file_id)
            downloader = MediaIoBaseDownload(buffer, request)
            done = False
            while not done:
                _, done = downloader.next_chunk()
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(
                f"Unable to download image {file_id}: {exc}"
            ) from exc
        return buffer.getvalue()

    def move_to_folder(self, file_id: str, folder_id: str) -> None:
        try:
            meta = self.service.files().get(fileId=file_id, fields="parents").execute()
            previous_parents = ",".join(meta.get("parents", []))
            (
                self.service.files()
                .update(
                    fileId=file_id,
                    addParents=folder_id,
                    removeParents=previous_parents,
                    fields="id, parents",
                )
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(f"Unable to move file: {exc}") from exc


@dataclass
class SheetsClient:
    service: "googleapiclient.discovery.Resource"

    def first_sheet_title(self, spreadsheet_id: str) -> str:
        try:
            meta = (
                self.service.spreadsheets()
                .get(
                    spreadsheetId=spreadsheet_id,
                    fields="sheets(properties(title))",
                )
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(
                f"Unable to get spreadsheet from file: {exc}"
            ) from exc
        sheets = meta.get("sheets", [])
        if not sheets:
            raise GoogleClientError("Spreadsheet has no worksheets.")
        return sheets[0]["properties"]["title"]

    def read_range(self, spreadsheet_id: str, a1_range: str) -> List[List[str]]:
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=a1_range)
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(
                f"Unable to retrieve data from sheet: {exc}"
            ) from exc
        return result.get("values", [])


@dataclass
class FormsClient:
    service: "googleapiclient.discovery.Resource"

    def create(self, title: str, document_title: str) -> Dict[str, Any]:
        body = {"info": {"title": title, "documentTitle": document_title}}
        try:
            return self.service.forms().create(body=body).execute()
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(f"Unable to create form: {exc}") from exc

    def batch_update(
        self, form_id: str, requests: Sequence[Dict[str, Any]]
    ) -> Dict[str, Any]:
        body = {"requests": list(requests)}
        try:
            return (
                self.service.forms()
                .batchUpdate(formId=form_id, body=body)
                .execute()
            )
        except Exception as exc:  # noqa: BLE001
            raise GoogleClientError(f"Unable to update form: {exc}") from exc


@dataclass
class GoogleServices:
    drive: DriveClient
    sheets: SheetsClient
    forms: FormsClient


def load_credentials(paths: AppPaths) -> "google.oauth2.credentials.Credentials":
    """
    Return OAuth user credentials, running the browser flow on first use.
    The token is cached in token.json; delete it to force a new login.
    """
    _ensure_dependencies()

    from google.oauth2.credentials import Credentials
    from google_auth_oauthlib.flow import InstalledAppFlow
    from google.auth.transport.requests import Request

    token_path = paths.token_file
    creds: Optional[Credentials] = None

    if token_path.exists():
        try:
            creds = Credentials.from_authorized_user_file(str(token_path), SCOPES)
        except ValueError as exc:
            raise GoogleClientError(
                f"Cached token {token_path} is invalid ({exc}). Delete it and retry."
            ) from exc

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            try:
                creds.refresh(Request())
            except Exception as exc:  # noqa: BLE001
                raise GoogleClientError(
                    f"Unable to refresh cached token ({exc}). Delete {token_path} and retry."
                ) from exc
        else:
            secrets_path = paths.credentials_file
            if not secrets_path.exists():
                raise GoogleClientError(
                    f"Unable to read client secret file: {secrets_path} does not exist."
                )
            flow = InstalledAppFlow.from_client_secrets_file(str(secrets_path), SCOPES)
            creds = flow.run_local_server(port=0)
        token_path.parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving credential file to: {token_path}")
        with token_path.open("w", encoding="utf-8") as handle:
            handle.write(creds.to_json())

    return creds


def build_google_services(paths: AppPaths) -> GoogleServices:
    creds = load_credentials(paths)

    from googleapiclient.discovery import build

    try:
        drive = build("drive", "v3", credentials=creds, cache_discovery=False)
        sheets = build("sheets", "v4", credentials=creds, cache_discovery=False)
        forms = build("forms", "v1", credentials=creds, cache_discovery=False)
    except Exception as exc:  # noqa: BLE001
        raise GoogleClientError(f"Unable to create Google API clients: {exc}") from exc

    return GoogleServices(
        drive=DriveClient(service=drive),
        sheets=SheetsClient(service=sheets),
        forms=FormsClient(service=forms),
    )
