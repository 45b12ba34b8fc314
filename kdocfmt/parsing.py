"""Shared parsing helpers for configuration and runtime value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or its textual form.

    Args:
        value: Integer or text value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is not a positive integer.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(f"`{field_name}` must be a positive integer.")
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive integer.") from exc
    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive integer.")
    return parsed


def parse_csv_list(value: object) -> tuple[str, ...]:
    """Split a comma-separated value into stripped non-empty items."""

    normalized = normalize_optional_string(value)
    if normalized is None:
        return ()
    items = (normalize_optional_string(item) for item in normalized.split(","))
    return tuple(item for item in items if item is not None)
