"""
Unit tests for submission parsing, Drive link handling and shuffling.
"""

import random
from collections import Counter

import pytest

from artvote_forms.submissions import (
    Option,
    Submission,
    SubmissionError,
    extract_file_id,
    option_label,
    parse_rows,
    shuffle_submissions,
    submission_range,
)


class TestParseRows:
    """Test cases for reading B2:D rows."""

    def test_reads_username_and_link(self):
        rows = [["ash", "ignored", "https://drive.google.com/open?id=abc"]]

        assert parse_rows(rows) == [
            Submission(username="ash", image_link="https://drive.google.com/open?id=abc")
        ]

    def test_skips_rows_without_link(self, capsys):
        rows = [
            ["ash"],
            ["misty", "x", "  "],
            ["brock", "x", "https://drive.google.com/open?id=b"],
        ]

        result = parse_rows(rows)

        assert [s.username for s in result] == ["brock"]
        err = capsys.readouterr().err
        assert "row 2" in err
        assert "row 3" in err

    def test_empty_sheet(self):
        assert parse_rows([]) == []


class TestExtractFileId:
    """Test cases for Drive file id extraction."""

    def test_open_link(self):
        assert extract_file_id("https://drive.google.com/open?id=1AbC-_x") == "1AbC-_x"

    def test_file_link(self):
        link = "https://drive.google.com/file/d/1AbC-_x/view?usp=sharing"
        assert extract_file_id(link) == "1AbC-_x"

    def test_invalid_link(self):
        with pytest.raises(SubmissionError):
            extract_file_id("https://example.com/picture.png")


class TestShuffle:
    """Test cases for the in-place shuffle."""

    @pytest.mark.parametrize("size", [0, 1, 2, 5, 30])
    def test_produces_permutation(self, size):
        items = list(range(size))
        original = list(items)

        result = shuffle_submissions(items, random.Random(size))

        assert result is items
        assert sorted(result) == original

    def test_preserves_duplicates(self):
        items = ["a", "a", "b", "c", "c", "c"]

        shuffle_submissions(items, random.Random(3))

        assert Counter(items) == Counter(["a", "a", "b", "c", "c", "c"])

    def test_seed_is_reproducible(self):
        first = shuffle_submissions(list(range(10)), random.Random(42))
        second = shuffle_submissions(list(range(10)), random.Random(42))
        assert first == second

    def test_reaches_every_order(self):
        rng = random.Random(0)
        seen = {tuple(shuffle_submissions([1, 2, 3], rng)) for _ in range(600)}
        assert len(seen) == 6


def test_submission_range_quotes_title():
    assert submission_range("Form Responses 1") == "'Form Responses 1'!B2:D"
    assert submission_range("Risposte del modulo") == "'Risposte del modulo'!B2:D"
    assert submission_range("Ash's") == "'Ash''s'!B2:D"


def test_option_label_is_one_based():
    assert option_label(0) == "Option 1"
    assert option_label(9) == "Option 10"


def test_choice_image_prefers_thumbnail():
    assert Option("Option 1", "https://host/a.png", "https://thumb/a").choice_image_url == "https://thumb/a"
    assert Option("Option 1", "https://host/a.png").choice_image_url == "https://host/a.png"
