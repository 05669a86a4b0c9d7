"""Offer tests for scope canonicalization and checksum validation."""

import pytest
from conftest import AB_CHECKSUM, ABC_CHECKSUM
from pydantic import ValidationError
from scopebits.canonicalizer import check_name, remove_duplicates, validate
from scopebits.core import fingerprint
from scopebits.exceptions import ChecksumMismatchError, InvalidNameError
from scopebits.models import RawScope, ValidScope


def test_remove_duplicates_should_keep_first_seen_order():
    """Test that duplicates are dropped and the first occurrence is kept."""
    assert remove_duplicates(["d", "a", "b", "a", "c"]) == ["d", "a", "b", "c"]


def test_validate_should_return_canonical_scope(fake_valid_xtest_scope):
    """Test the canonical form of the "xtest" scope."""
    # Given a raw scope with tags c, a, b and a matching checksum
    # When validating it
    valid = validate(fake_valid_xtest_scope)
    # Then indexes should follow the first-seen order
    assert valid == ValidScope(name="xtest", checksum=ABC_CHECKSUM, tags=["c", "a", "b"])
    assert valid.tag_index == {"c": 0, "a": 1, "b": 2}


def test_validate_should_remove_duplicate_tags():
    """Test that repeated raw tags are collapsed before indexing."""
    # Given a raw scope whose tags contain repeats
    raw = RawScope(name="xtest", checksum=ABC_CHECKSUM, tags=["c", "a", "b", "a", "c"])
    # When validating it
    valid = validate(raw)
    # Then the checksum should match and no tag should be repeated
    assert valid.tags == ("c", "a", "b")
    assert len(set(valid.tags)) == len(valid.tags)


def test_validate_should_accept_mapping_input():
    """Test that a plain mapping is accepted as a raw scope."""
    valid = validate({"name": "test", "checksum": AB_CHECKSUM, "tags": ["a", "b"]})
    assert valid.tag_index == {"a": 0, "b": 1}


def test_validate_should_reject_malformed_mapping():
    """Test that a mapping without the RawScope shape raises ValidationError."""
    with pytest.raises(ValidationError):
        validate({"name": "test", "tags": ["a", "b"]})


def test_validate_should_accept_empty_tag_set():
    """Test that a scope without tags is valid when its checksum matches."""
    valid = validate(RawScope(name="empty", checksum=fingerprint([]), tags=[]))
    assert valid.tags == ()
    assert valid.tag_index == {}


def test_validate_should_not_mutate_input():
    """Test that the raw scope is left untouched."""
    raw = RawScope(name="xtest", checksum=ABC_CHECKSUM, tags=["c", "a", "c", "b"])
    validate(raw)
    assert raw.tags == ["c", "a", "c", "b"]


def test_validate_should_fail_on_defect_checksum():
    """Test that an unrelated checksum is refused."""
    raw = RawScope(name="test", checksum="ab19ec537f09499b26f", tags=["a", "b"])
    with pytest.raises(ChecksumMismatchError) as error:
        validate(raw)
    assert error.value.computed == AB_CHECKSUM
    assert error.value.declared == "ab19ec537f09499b26f"


@pytest.mark.parametrize("position", [0, 1, 10, 22, -1])
def test_validate_should_fail_when_any_checksum_character_changes(position):
    """Test that altering a single character of the checksum is detected."""
    # Given a correct checksum with one character replaced
    chars = list(AB_CHECKSUM)
    chars[position] = "1" if chars[position] != "1" else "2"
    altered = "".join(chars)
    # When validating the scope
    # Then a ChecksumMismatchError should be raised
    with pytest.raises(ChecksumMismatchError):
        validate(RawScope(name="test", checksum=altered, tags=["a", "b"]))


def test_validate_should_fail_when_tag_set_changes():
    """Test that an extra tag is detected as drift."""
    with pytest.raises(ChecksumMismatchError):
        validate(RawScope(name="test", checksum=AB_CHECKSUM, tags=["a", "b", "c"]))


@pytest.mark.parametrize(
    "name",
    [
        pytest.param("", id="empty"),
        pytest.param("test[😇", id="open bracket before emoji"),
        pytest.param("test]😇", id="close bracket before emoji"),
        pytest.param("😇[", id="open bracket after emoji"),
        pytest.param("[", id="open bracket only"),
        pytest.param("]test", id="leading close bracket"),
        pytest.param("te[st]", id="both brackets"),
    ],
)
def test_validate_should_reject_invalid_names(name):
    """Test that empty names and names holding [ or ] are refused."""
    raw = RawScope(name=name, checksum=AB_CHECKSUM, tags=["a", "b"])
    with pytest.raises(InvalidNameError):
        validate(raw)


@pytest.mark.parametrize(
    "name",
    [
        pytest.param("test😇", id="emoji"),
        pytest.param("名前", id="cjk"),
        pytest.param("with space", id="space"),
        pytest.param("(){}<>", id="other brackets"),
    ],
)
def test_validate_should_accept_unicode_names(name):
    """Test that any name without [ or ] is accepted."""
    raw = RawScope(name=name, checksum=AB_CHECKSUM, tags=["a", "b"])
    assert validate(raw).name == name


def test_validate_should_check_name_before_checksum():
    """Test that an invalid name wins over an invalid checksum."""
    with pytest.raises(InvalidNameError):
        validate(RawScope(name="", checksum="wrong", tags=["a"]))


def test_check_name_should_return_valid_name():
    """Test that check_name hands a valid name back."""
    assert check_name("ok") == "ok"
