"""Small text and number helpers."""

from collections.abc import Sequence


def format_title(text: str) -> str:
    """Return the text upper-cased and framed as a section title."""
    return f"=== {text.upper()} ==="


def calculate_average(numbers: Sequence[float]) -> float | None:
    """Return the mean of the numbers, or None when there are none."""
    if not numbers:
        return None
    return sum(numbers) / len(numbers)


def is_valid_email(email: str) -> bool:
    """Loosely check that the string looks like an e-mail address."""
    return "@" in email and "." in email