from datetime import date, datetime
from typing import Union

from app.core.errors import ValidationError


def format_date(value: Union[date, datetime, str]) -> str:
    """
    Render a date as YYYY-MM-DD.

    Strings must already be ISO dates (time parts are accepted and dropped).

    Raises:
        ValidationError: If a string cannot be parsed as an ISO date.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text).isoformat()
        return datetime.fromisoformat(text).date().isoformat()
    except ValueError as e:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from e
