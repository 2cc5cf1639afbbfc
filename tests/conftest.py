"""Shared fixtures: Google service wrappers replaced by mocks."""

from unittest.mock import MagicMock

import pytest

from artvote_forms.config import AppConfig, ContestRequest
from artvote_forms.google_client import (
    DriveClient,
    FormsClient,
    GoogleServices,
    SheetsClient,
    contest_folder_query,
    response_sheet_query,
)

SHEET_ROWS = [
    ["ash", "2024-01-01", "https://drive.google.com/open?id=file-a"],
    ["misty", "2024-01-02", "https://drive.google.com/open?id=file-b"],
    ["brock", "2024-01-03", "https://drive.google.com/file/d/file-c/view"],
]


@pytest.fixture
def services():
    drive = MagicMock(spec=DriveClient)
    sheets = MagicMock(spec=SheetsClient)
    forms = MagicMock(spec=FormsClient)

    def find_first(query, what):
        if query == response_sheet_query(7):
            return {"id": "sheet-id", "name": "Contest 7 (Responses)"}
        if query == contest_folder_query(7):
            return {"id": "folder-id", "name": "Contest #7"}
        raise AssertionError(f"unexpected query {query!r}")

    drive.find_first.side_effect = find_first
    drive.get_image_links.side_effect = lambda file_id: (
        f"https://drive.example/{file_id}/content",
        f"https://thumbs.example/{file_id}",
    )
    drive.download.side_effect = lambda file_id: f"bytes-{file_id}".encode()

    sheets.first_sheet_title.return_value = "Form Responses 1"
    sheets.read_range.return_value = [list(row) for row in SHEET_ROWS]

    forms.create.return_value = {
        "formId": "form-id",
        "responderUri": "https://docs.google.com/forms/d/e/form-id/viewform",
    }
    forms.batch_update.return_value = {}

    return GoogleServices(drive=drive, sheets=sheets, forms=forms)


@pytest.fixture
def config():
    return AppConfig(api_key="secret-key")


@pytest.fixture
def contest_request():
    return ContestRequest(pokemon="Pikachu", number=7, categories=["Cutest", "Funniest"])
