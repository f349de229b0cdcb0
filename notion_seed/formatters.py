"""
Rendering of property values returned by a database query into display strings.

The set of property value types is closed: every type in READ_PROPERTY_TYPES has a
formatter below, and anything else is treated as a programming error rather than
being silently dropped.
"""

import json
from typing import Dict, Any, Callable, Optional

from .utils import to_iso_string

MISSING_VALUE = "???"


class UnhandledPropertyTypeError(AssertionError):
    """Raised when a property value has a type tag no formatter handles."""

    def __init__(self, value: Any, context: str = "property"):
        self.value = value
        tag = value.get("type") if isinstance(value, dict) else value
        super().__init__(f"Didn't expect to get here: unhandled {context} type {tag!r}")


def user_to_string(user: Dict[str, Any]) -> str:
    return f"{user['id']}: {user.get('name') or 'Unknown Name'}"


def option_to_string(option: Dict[str, Any]) -> str:
    return f"{option['id']} {option['name']}"


def _bool_to_string(value: bool) -> str:
    return "true" if value else "false"


def _date_to_string(date: Optional[Dict[str, Any]]) -> str:
    if not date or not date.get("start"):
        return MISSING_VALUE
    return to_iso_string(date["start"])


def format_formula(formula: Dict[str, Any]) -> str:
    """Render a formula result (string, number, boolean or date)."""
    result_type = formula.get("type")
    if result_type == "string":
        return formula.get("string") or MISSING_VALUE
    elif result_type == "number":
        number = formula.get("number")
        return MISSING_VALUE if number is None else str(number)
    elif result_type == "boolean":
        return _bool_to_string(formula["boolean"])
    elif result_type == "date":
        return _date_to_string(formula.get("date"))
    raise UnhandledPropertyTypeError(formula, context="formula")


def format_rollup(rollup: Dict[str, Any]) -> str:
    """Render a rollup result (number, date or array)."""
    result_type = rollup.get("type")
    if result_type == "number":
        number = rollup.get("number")
        return MISSING_VALUE if number is None else str(number)
    elif result_type == "date":
        return _date_to_string(rollup.get("date"))
    elif result_type == "array":
        return json.dumps(rollup["array"])
    raise UnhandledPropertyTypeError(rollup, context="rollup")


# type_name -> fn(payload) -> str
VALUE_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    'checkbox': _bool_to_string,
    'created_by': user_to_string,
    'created_time': to_iso_string,
    'date': _date_to_string,
    'email': str,
    'url': str,
    'number': str,
    'phone_number': str,
    'select': option_to_string,
    'multi_select': lambda options: ", ".join(option_to_string(o) for o in options),
    'people': lambda people: ", ".join(user_to_string(p) for p in people),
    'last_edited_by': user_to_string,
    'last_edited_time': to_iso_string,
    'title': lambda segments: ", ".join(s["plain_text"] for s in segments),
    'rich_text': lambda segments: ", ".join(s["plain_text"] for s in segments),
    'files': lambda files: ", ".join(f["name"] for f in files),
    'formula': format_formula,
    'rollup': format_rollup,
}


def extract_value_to_string(value: Dict[str, Any]) -> str:
    """
    Render one property value as a human-readable string.

    Args:
        value: Property value as returned by the query endpoint,
               e.g. {"id": "abc", "type": "checkbox", "checkbox": True}

    Returns:
        Display string for the value

    Raises:
        UnhandledPropertyTypeError: If the value's type has no formatter
    """
    formatter = VALUE_FORMATTERS.get(value.get("type"))
    if formatter is None:
        raise UnhandledPropertyTypeError(value)

    # empty properties come back with a null payload
    payload = value.get(value["type"])
    if payload is None:
        return MISSING_VALUE
    return formatter(payload)
