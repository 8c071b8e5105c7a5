"""Lenient typed extraction of optional fields from definition elements.

Every accessor returns the caller's default when the field is absent or its
text does not parse as the requested type. Nothing is raised or logged for a
missing or malformed optional field.
"""

import re
from collections.abc import Callable
from typing import TypeVar

from cutscene_importer.instruction_definitions.entities.color import Color
from cutscene_importer.instruction_definitions.importer import keywords
from cutscene_importer.instruction_definitions.importer.document import Element

T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Invalid bool '{text}'")


def parse_int(text: str) -> int:
    value = text.strip()
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid int '{text}'")
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        raise ValueError(f"Int '{text}' is out of range")
    return number


def parse_float(text: str) -> float:
    # Culture invariant: '.' is the only decimal separator
    value = text.strip()
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid float '{text}'")
    return float(value)


def get_child_value(element: Element, name: str, parse: Callable[[str], T], default: T) -> T:
    """Parse the text of the first child called `name`, or return `default`."""
    child = element.find_child(name)
    if child is None:
        return default
    try:
        return parse(child.inner_text)
    except ValueError:
        return default


def get_id(element: Element, default: str = "") -> str:
    return element.attributes.get(keywords.ID, default)


def get_bool_child(element: Element, name: str, default: bool = False) -> bool:
    return get_child_value(element, name, parse_bool, default)


def get_int_child(element: Element, name: str, default: int = 0) -> int:
    return get_child_value(element, name, parse_int, default)


def get_float_child(element: Element, name: str, default: float = 0.0) -> float:
    return get_child_value(element, name, parse_float, default)


def get_string_child(element: Element, name: str, default: str = "") -> str:
    return get_child_value(element, name, str, default)


def get_color_child(element: Element, name: str, default: Color | None = None) -> Color:
    return get_child_value(element, name, Color.from_html, default if default is not None else Color())
