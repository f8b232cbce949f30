"""Validators — tests for the predicate library used by rule tables.

Tests cover:
    - is_required treats None and "" as absent, 0 and False as present
    - min_length rejects every non-string, even when str() would pass
    - is_email is a permissive shape check
    - All predicates are total (no exceptions on odd input)
"""

import pytest

from taskforge.core.validators import is_email, is_required, min_length


# ─── is_required ─────────────────────────────────────────────────

def test_is_required_zero_is_present():
    assert is_required(0) is True


def test_is_required_false_is_present():
    assert is_required(False) is True


def test_is_required_empty_string_is_absent():
    assert is_required("") is False


def test_is_required_none_is_absent():
    assert is_required(None) is False


def test_is_required_whitespace_counts_as_present():
    assert is_required(" ") is True


def test_is_required_empty_list_is_present():
    assert is_required([]) is True


# ─── min_length ──────────────────────────────────────────────────

def test_min_length_rejects_number_even_if_long_enough():
    assert min_length(12345, 3) is False


def test_min_length_accepts_exact_length():
    assert min_length("abc", 3) is True


def test_min_length_rejects_shorter_string():
    assert min_length("ab", 3) is False


@pytest.mark.parametrize("value", [None, ["a", "b", "c"], 3.14, b"abc"])
def test_min_length_rejects_non_strings(value):
    assert min_length(value, 1) is False


def test_min_length_zero_accepts_empty_string():
    assert min_length("", 0) is True


# ─── is_email ────────────────────────────────────────────────────

def test_is_email_accepts_minimal_shape():
    assert is_email("a@b.c") is True


def test_is_email_rejects_plain_text():
    assert is_email("not-an-email") is False


def test_is_email_rejects_missing_dot_after_at():
    assert is_email("user@localhost") is False


def test_is_email_is_unanchored():
    """Permissive: an email-shaped token anywhere in the string passes."""
    assert is_email("contact: a@b.c please") is True


@pytest.mark.parametrize("value", [None, 42, ["a@b.c"], {"email": "a@b.c"}])
def test_is_email_rejects_non_strings(value):
    assert is_email(value) is False
