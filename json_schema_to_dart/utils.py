"""
Utility functions for JSON Schema to Dart generator.

Name normalization between schema identifiers and Dart names.
"""

import json
import re
from typing import Any

# Runs of separators, with the character that follows them
_SEPARATOR_PATTERN = re.compile(r"[_\-\s]+(.)?")
_CAPITAL_PATTERN = re.compile(r"([A-Z])")
_LOWER_CAMEL_PATTERN = re.compile(r"[a-z]+([A-Z][a-z]*)*")
_ENUM_SEGMENT_PATTERN = re.compile(r"[_\-\s.]+")
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")

DART_RESERVED_KEYWORDS = {
    "assert",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "if",
    "in",
    "is",
    "new",
    "null",
    "rethrow",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "var",
    "void",
    "while",
    "with",
}

# Names the generated model code already uses for members and parameters
MODEL_MEMBER_NAMES = {
    "hashCode",
    "runtimeType",
    "toString",
    "noSuchMethod",
    "toMap",
    "toJson",
    "fromMap",
    "fromJson",
    "other",
    # Top-level functions the generated code calls
    "identical",
    "jsonEncode",
    "jsonDecode",
}

# Members every Dart enum defines or inherits
ENUM_MEMBER_NAMES = {"values", "index", "name", "hashCode", "runtimeType", "toString", "noSuchMethod", "toMap", "fromMap"}


def to_directory_name(identifier: str) -> str:
    """Convert an identifier to the snake_case name used for folders and files.

    Examples:
        "UserProfile" -> "user_profile"
        "userRole" -> "user_role"
        "order-item" -> "order_item"
    """
    text = _CAPITAL_PATTERN.sub(r"_\1", identifier).lower()
    text = re.sub(r"[_\-\s]+", "_", text)
    if text.startswith("_"):
        text = text[1:]
    return text


def _camelize(identifier: str) -> str:
    return _SEPARATOR_PATTERN.sub(lambda m: (m.group(1) or "").upper(), identifier)


def to_type_case(identifier: str) -> str:
    """Convert an identifier to UpperCamelCase (class and enum names).

    Examples:
        "user_profile" -> "UserProfile"
        "address" -> "Address"
    """
    camel = _camelize(identifier)
    return camel[:1].upper() + camel[1:]


def to_field_case(identifier: str) -> str:
    """Convert an identifier to lowerCamelCase (field names)."""
    camel = _camelize(identifier)
    return camel[:1].lower() + camel[1:]


def to_enum_member_name(literal: str) -> str:
    """Convert an enum literal to a lowerCamelCase member name.

    Literals already in lowerCamelCase are returned unchanged.

    Examples:
        "admin_user" -> "adminUser"
        "ADMIN_USER" -> "adminUser"
        "guest" -> "guest"
    """
    if _LOWER_CAMEL_PATTERN.fullmatch(literal):
        return literal
    parts = _ENUM_SEGMENT_PATTERN.split(literal)
    head, tail = parts[0], parts[1:]
    return head.lower() + "".join(part[:1].upper() + part[1:].lower() for part in tail)


def to_dart_identifier(name: str, prefix: str, reserved: set[str] | frozenset[str] | None = None) -> str:
    """Make a name usable as a Dart identifier.

    Invalid characters are dropped, names starting with a digit (or left empty)
    get ``prefix``, and reserved words get a trailing underscore.
    """
    text = _INVALID_IDENTIFIER_CHARS.sub("", name)
    if not text or text[0].isdigit():
        text = prefix + text[:1].upper() + text[1:]
    if text in DART_RESERVED_KEYWORDS or (reserved and text in reserved):
        text += "_"
    return text


def dart_string(value: str) -> str:
    """Render a single-quoted Dart string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$").replace("\n", "\\n").replace("\r", "\\r")
    return f"'{escaped}'"


def dart_literal(value: Any) -> str:
    """Render a JSON scalar as a Dart literal (strings quoted, numbers/bools/null as is)."""
    if isinstance(value, str):
        return dart_string(value)
    return json.dumps(value)


def literal_text(value: Any) -> str:
    """Text form of a JSON scalar, used to name enum members."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def to_class_name(identifier: str) -> str:
    """UpperCamelCase name that is also a valid Dart type identifier."""
    return to_dart_identifier(to_type_case(identifier), "Type")
