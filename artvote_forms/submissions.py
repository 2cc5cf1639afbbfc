from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence, TypeVar
from urllib.parse import parse_qs, urlparse

from .colors import RESET, WARNING

# Columns B (username) through D (submission link), skipping the header row.
SUBMISSION_RANGE = "B2:D"

T = TypeVar("T")


@dataclass(frozen=True)
class Submission:
    username: str
    image_link: str


@dataclass(frozen=True)
class Option:
    label: str
    image_url: str
    thumbnail_url: Optional[str] = None

    @property
    def choice_image_url(self) -> str:
        return self.thumbnail_url or self.image_url


class SubmissionError(RuntimeError):
    pass


def submission_range(sheet_title: str) -> str:
    escaped = sheet_title.replace("'", "''")
    return f"'{escaped}'!{SUBMISSION_RANGE}"


def parse_rows(rows: Sequence[Sequence[object]]) -> List[Submission]:
    """Turn B2:D rows of the response sheet into submissions."""
    submissions: List[Submission] = []
    for row_number, row in enumerate(rows, start=2):
        if len(row) < 3 or not str(row[2]).strip():
            print(
                f"{WARNING}[WARN]{RESET} Skipping row {row_number}: no submission link",
                file=sys.stderr,
            )
            continue
        submissions.append(
            Submission(username=str(row[0]).strip(), image_link=str(row[2]).strip())
        )
    return submissions


def extract_file_id(link: str) -> str:
    """Return the Drive file id of an uploaded form attachment."""
    parsed = urlparse(link.strip())
    ids = parse_qs(parsed.query).get("id")
    if ids and ids[0]:
        return ids[0]
    match = re.search(r"/d/([\w-]+)", parsed.path)
    if match:
        return match.group(1)
    raise SubmissionError(f"Could not find a Drive file id in '{link}'.")


def shuffle_submissions(
    items: MutableSequence[T], rng: Optional[random.Random] = None
) -> MutableSequence[T]:
    """Shuffle in place (inside-out Fisher-Yates) and return the same list."""
    rng = rng or random.Random()
    for i in range(len(items)):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def option_label(index: int) -> str:
    return f"Option {index + 1}"
