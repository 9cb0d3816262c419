"""Input presence checks shared by the services."""

from typing import Any

from hrms.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings.

    Examples:
        >>> is_blank(None), is_blank("  "), is_blank("Bob")
        (True, True, False)
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_fields(fields: dict[str, Any], message: str) -> None:
    """Raise ValidationError if any of the given fields is blank.

    Args:
        fields: Mapping of field name to submitted value
        message: Error message reported to the client

    Raises:
        ValidationError: Listing every blank field
    """
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        raise ValidationError(
            message,
            errors=[{"field": name, "message": "Field is required"} for name in missing],
        )
