"""Small string helpers shared by rules and schemas."""

import re

_CHUNK_PATTERN = re.compile(r"[^\W_]+")


def _split_words(chunk: str) -> list[str]:
    """Split a run of letters and digits at case and digit boundaries."""
    words = []
    start = 0
    for i in range(1, len(chunk)):
        prev, char = chunk[i - 1], chunk[i]
        following = chunk[i + 1:i + 2]
        if (
            prev.isdigit() != char.isdigit()
            or (prev.islower() and char.isupper())
            or (prev.isupper() and char.isupper() and following.islower())
        ):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def string_is_not_empty(value: str) -> bool:
    """Return True if the string has content other than whitespace."""
    return len(value.strip()) > 0


def string_is_more_than(length: int, value: str) -> bool:
    """Return True if the trimmed string is longer than ``length``."""
    return len(value.strip()) > length


def string_is_less_than(length: int, value: str) -> bool:
    """Return True if the trimmed string is shorter than ``length``."""
    return len(value.strip()) < length


def start_case(value: str) -> str:
    """Convert an identifier into space separated, capitalized words.

    Args:
        value: Field name in snake_case, camelCase, kebab-case or similar

    Returns:
        Human readable label

    Examples:
        >>> start_case("first_name")
        'First Name'
        >>> start_case("firstName")
        'First Name'
        >>> start_case("HTTPStatus")
        'HTTP Status'
        >>> start_case("prénom")
        'Prénom'
    """
    words = [word for chunk in _CHUNK_PATTERN.findall(str(value)) for word in _split_words(chunk)]
    return " ".join(word[:1].upper() + word[1:] for word in words)
