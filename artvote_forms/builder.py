from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .colors import ACCENT, INFO, MUTED, RESET, SUCCESS
from .config import AppConfig, ContestRequest
from .google_client import (
    GoogleServices,
    contest_folder_query,
    response_sheet_query,
)
from .image_host import ImageHostClient
from . import layout
from .submissions import (
    Option,
    Submission,
    SubmissionError,
    extract_file_id,
    option_label,
    parse_rows,
    shuffle_submissions,
    submission_range,
)

EDIT_URL_TEMPLATE = "https://docs.google.com/forms/d/{form_id}/edit"


@dataclass
class BuildResult:
    form_id: str
    responder_uri: Optional[str]
    edit_url: str
    options: List[Option] = field(default_factory=list)


def read_submissions(
    services: GoogleServices,
    number: int,
    out: Callable[[str], None] = print,
) -> List[Submission]:
    sheet = services.drive.find_first(
        response_sheet_query(number),
        "form responses sheet (was it created from the form?)",
    )
    title = services.sheets.first_sheet_title(sheet["id"])
    rows = services.sheets.read_range(sheet["id"], submission_range(title))
    submissions = parse_rows(rows)
    for submission in submissions:
        out(f"{submission.username}, {submission.image_link}")
    return submissions


def rehost_submission(
    services: GoogleServices,
    image_host: ImageHostClient,
    submission: Submission,
    index: int,
) -> Option:
    file_id = extract_file_id(submission.image_link)
    _, thumbnail = services.drive.get_image_links(file_id)
    content = services.drive.download(file_id)
    url = image_host.upload("img", content)
    return Option(label=option_label(index), image_url=url, thumbnail_url=thumbnail)


def build_voting_form(
    services: GoogleServices,
    config: AppConfig,
    request: ContestRequest,
    *,
    rng: Optional[random.Random] = None,
    image_host: Optional[ImageHostClient] = None,
    out: Callable[[str], None] = print,
) -> BuildResult:
    image_host = image_host or ImageHostClient(
        upload_url=config.upload_url,
        api_key=config.api_key,
        placeholder_url=config.placeholder_url,
        timeout=config.upload_timeout,
    )

    submissions = read_submissions(services, request.number, out)
    if not submissions:
        raise SubmissionError(
            f"No submissions with an image link found for Contest #{request.number}."
        )
    folder =services.drive.find_first(
        contest_folder_query(request.number), f"folder for Contest #{request.number}"
    )

    title = layout.form_title(request.number, request.pokemon)
    form = services.forms.create(title, title)
    form_id = form["formId"]
    services.drive.move_to_folder(form_id, folder["id"])
    out(f"{INFO}Created{RESET} {ACCENT}{title}{RESET} in {ACCENT}{folder['name']}{RESET}")

    services.forms.batch_update(form_id, layout.intro_requests())

    shuffle_submissions(submissions, rng)

    options: List[Option] = []
    for index, submission in enumerate(submissions):
        option = rehost_submission(services, image_host, submission, index)
        services.forms.batch_update(
            form_id, layout.submission_requests(index, option.image_url)
        )
        out(f"  {MUTED}{option.label}{RESET} {option.image_url}")
        options.append(option)

    for index, category in enumerate(request.categories):
        services.forms.batch_update(
            form_id,
            layout.category_requests(
                len(options), index, category, options, config.max_votes
            ),
        )

    services.forms.batch_update(
        form_id,
        layout.closing_requests(
            len(options), len(request.categories), options, config.max_votes
        ),
    )

    result = BuildResult(
        form_id=form_id,
        responder_uri=form.get("responderUri"),
        edit_url=EDIT_URL_TEMPLATE.format(form_id=form_id),
        options=options,
    )
    out(f"{SUCCESS}Voting form ready{RESET}: {ACCENT}{result.edit_url}{RESET}")
    if result.responder_uri:
        out(f"Responder link: {ACCENT}{result.responder_uri}{RESET}")
    return result
