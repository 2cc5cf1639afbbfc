"""
Item placement and request bodies for the voting form.

The form is filled in four batches and every item is created at an explicit
index:

    0, 1                      intro (username question, submissions page)
    2i+2, 2i+3                submission i (page break, image)
    2n+2+2j, 2n+3+2j          category j (page break, checkbox question)
    2n+2+2c .. 2n+5+2c        wildcard page, wildcard question,
                              feedback page, feedback question
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from .submissions import Option, option_label

INTRO_ITEM_COUNT = 2
ITEMS_PER_SUBMISSION = 2
ITEMS_PER_CATEGORY = 2
CLOSING_ITEM_COUNT = 4

FORM_TITLE_TEMPLATE = "Pokémon Workshop Art Contest #{number} {pokemon} Voting"

SUBMISSIONS_DESCRIPTION = (
    "You will be presented with all the submissions first. "
    "You will be able to vote on them after viewing all of them."
)
CATEGORY_QUESTION = (
    'Which entries fit "{category}" best? Vote up to {max_votes}! '
    "(Please remember to try to vote for different entries for each category!)"
)
WILDCARD_QUESTION = (
    "Which entries do you feel are worthy of recognition? Vote up to {max_votes}! "
    "(Please remember to try to vote for different entries for each category!)"
)
FEEDBACK_DESCRIPTION = (
    "We want these contests to be the best they can be. "
    "Please tell us any suggestions/concerns you may have!"
)

Request = Dict[str, Any]


def form_title(number: int, pokemon: str) -> str:
    return FORM_TITLE_TEMPLATE.format(number=number, pokemon=pokemon)


def submission_indexes(index: int) -> Tuple[int, int]:
    start = INTRO_ITEM_COUNT + index * ITEMS_PER_SUBMISSION
    return start, start + 1


def categories_start(submission_count: int) -> int:
    return INTRO_ITEM_COUNT + submission_count * ITEMS_PER_SUBMISSION


def category_indexes(submission_count: int, index: int) -> Tuple[int, int]:
    start = categories_start(submission_count) + index * ITEMS_PER_CATEGORY
    return start, start + 1


def closing_indexes(submission_count: int, category_count: int) -> List[int]:
    start = categories_start(submission_count) + category_count * ITEMS_PER_CATEGORY
    return list(range(start, start + CLOSING_ITEM_COUNT))


def total_items(submission_count: int, category_count: int) -> int:
    return (
        INTRO_ITEM_COUNT
        + submission_count * ITEMS_PER_SUBMISSION
        + category_count * ITEMS_PER_CATEGORY
        + CLOSING_ITEM_COUNT
    )


def _create_item(item: Dict[str, Any], index: int) -> Request:
    return {"createItem": {"item": item, "location": {"index": index}}}


def _page_break(title: str, index: int, description: str = "") -> Request:
    item: Dict[str, Any] = {"title": title, "pageBreakItem": {}}
    if description:
        item["description"] = description
    return _create_item(item, index)


def _text_question(title: str, index: int, *, required: bool, paragraph: bool) -> Request:
    item = {
        "title": title,
        "questionItem": {
            "question": {
                "required": required,
                "textQuestion": {"paragraph": paragraph},
            }
        },
    }
    return _create_item(item, index)


def _checkbox_question(
    title: str, index: int, options: Sequence[Option]
) -> Request:
    item = {
        "title": title,
        "questionItem": {
            "question": {
                "required": True,
                "choiceQuestion": {
                    "type": "CHECKBOX",
                    "options": choice_options(options),
                    "shuffle": False,
                },
            }
        },
    }
    return _create_item(item, index)


def choice_options(options: Sequence[Option]) -> List[Dict[str, Any]]:
    return [
        {"value": option.label, "image": {"sourceUri": option.choice_image_url}}
        for option in options
    ]


def intro_requests() -> List[Request]:
    return [
        _text_question("Discord Username", 0, required=True, paragraph=False),
        _page_break("The Submissions!", 1, SUBMISSIONS_DESCRIPTION),
    ]


def submission_requests(index: int, image_url: str) -> List[Request]:
    page_index, image_index = submission_indexes(index)
    return [
        _page_break(option_label(index), page_index),
        _create_item({"imageItem": {"image": {"sourceUri": image_url}}}, image_index),
    ]


def category_requests(
    submission_count: int,
    index: int,
    category: str,
    options: Sequence[Option],
    max_votes: int,
) -> List[Request]:
    page_index, question_index = category_indexes(submission_count, index)
    title = CATEGORY_QUESTION.format(category=category, max_votes=max_votes)
    return [
        _page_break(category, page_index),
        _checkbox_question(title, question_index, options),
    ]


def closing_requests(
    submission_count: int,
    category_count: int,
    options: Sequence[Option],
    max_votes: int,
) -> List[Request]:
    wildcard, wildcard_question, feedback, feedback_question = closing_indexes(
        submission_count, category_count
    )
    return [
        _page_break("Wildcard", wildcard),
        _checkbox_question(
            WILDCARD_QUESTION.format(max_votes=max_votes), wildcard_question, options
        ),
        _page_break("Feedback", feedback, FEEDBACK_DESCRIPTION),
        _text_question(
            "Optional Feedback", feedback_question, required=False, paragraph=True
        ),
    ]
