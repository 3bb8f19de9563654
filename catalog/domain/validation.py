import re

USER_ID_LENGTH = 12

# Letters, with single spaces or hyphens allowed between letter runs.
_NAME_PATTERN = re.compile(r"[^\W\d_]+(?:[ -][^\W\d_]+)*")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def _is_digit_string(value: object, length: int) -> bool:
    return (
        isinstance(value, str)
        and len(value) == length
        and _DIGITS_PATTERN.fullmatch(value) is not None
    )


def _isbn10_checksum_ok(isbn: str) -> bool:
    total = sum((10 - i) * int(digit) for i, digit in enumerate(isbn))
    return total % 11 == 0


def _isbn13_checksum_ok(isbn: str) -> bool:
    total = sum((3 if i % 2 else 1) * int(digit) for i, digit in enumerate(isbn))
    return total % 10 == 0


def is_valid_isbn(isbn: object) -> bool:
    """
    Check that an ISBN is a plain digit string with a valid checksum.

    Both ISBN-13 and ISBN-10 are accepted. Hyphens, spaces and the ISBN-10
    "X" check character are rejected.
    """
    if _is_digit_string(isbn, 13):
        return _isbn13_checksum_ok(isbn)
    if _is_digit_string(isbn, 10):
        return _isbn10_checksum_ok(isbn)
    return False


def is_valid_user_id(user_id: object) -> bool:
    """A user id is exactly twelve ASCII digits."""
    return _is_digit_string(user_id, USER_ID_LENGTH)


def is_valid_name(name: object) -> bool:
    """
    Validate a person name (book author or user name).

    - Non-empty, letters only
    - Single spaces or hyphens allowed between words ("Mary-Jane Smith")
    - No leading, trailing or consecutive separators ("J--ohn", " John")
    """
    if not isinstance(name, str):
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


def is_valid_title(title: object) -> bool:
    """A title is any string with at least one non-whitespace character."""
    return isinstance(title, str) and bool(title.strip())
