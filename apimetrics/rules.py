"""Naming rules for API parameters, following AIP-122 and AIP-140."""

import re
from dataclasses import dataclass, field as _dc_field

__all__ = [
    "Field",
    "MessageType",
    "snake_case",
    "check_name_suffix",
    "check_snake_case",
    "check_abbreviation",
    "check_numbers",
    "check_reserved_words",
    "check_prepositions",
    "aip122_driver",
    "aip140_driver",
]


@dataclass
class Field:
    """A named field of an API description and the key path leading to it."""

    name: str
    path: list[str] = _dc_field(default_factory=list)


@dataclass
class MessageType:
    """A rule violation: (level, message, suggestion) and the key path."""

    message: tuple[str, str, str]
    path: list[str] = _dc_field(default_factory=list)


_DELIMITERS = frozenset("-_ ")

_ABBREVIATIONS = {
    "configuration": "config",
    "identifier": "id",
    "information": "info",
    "specification": "spec",
    "statistics": "stats",
}

_RESERVED_WORDS = frozenset(
    """
    abstract and arguments as assert async await boolean break byte
    case catch char class const continue debugger def default del delete do double elif
    else enum eval except export extends false final finally float for from function global
    goto if implements import in instanceof int interface is lambda let long native new nonlocal
    not null or package pass private protected public raise return short static strictfp
    super switch synchronized this throw throws transient true try typeof var void volatile
    while with yield
    """.split()
)

_PREPOSITIONS = frozenset(
    """
    after at before between but by except
    for from in including into of over since to
    toward under upon with within without
    """.split()
)

_NUMBER_START = re.compile(r"[0-9]")


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_delimiter(ch: str) -> bool:
    return ch in _DELIMITERS and ch != ""


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 32) if _is_upper(ch) else ch


def snake_case(text: str) -> str:
    """Convert camelCase, PascalCase, kebab-case or spaced words to snake_case.

    Word boundaries are found between a lower-case and an upper-case ASCII
    letter, before the last capital of an acronym followed by a lower-case
    letter, and at runs of '-', '_' or ' '.
    """
    text = text.strip()
    out: list[str] = []
    prev = curr = ""
    for nxt in text:
        if _is_delimiter(curr):
            if not _is_delimiter(prev):
                out.append("_")
        elif _is_upper(curr):
            if _is_lower(prev) or (_is_upper(prev) and _is_lower(nxt)):
                out.append("_")
            out.append(_ascii_lower(curr))
        elif curr:
            out.append(_ascii_lower(curr))
        prev, curr = curr, nxt
    if text:
        if _is_upper(curr) and _is_lower(prev):
            out.append("_")
        out.append(_ascii_lower(curr))
    return "".join(out)


def check_name_suffix(name: str) -> tuple[bool, str]:
    """Report whether a name ends in "_name", with the name stripped of it."""
    if name.endswith("_name"):
        return True, name[: -len("_name")]
    return False, name


def check_snake_case(field: str) -> tuple[bool, str]:
    """Report whether a name is lower snake case, with the suggested form."""
    snake = snake_case(field).lower()
    return snake == field, snake


def check_abbreviation(field: str) -> tuple[bool, str]:
    """Report whether a name has a common abbreviation, with that abbreviation."""
    suggestion = _ABBREVIATIONS.get(field)
    if suggestion is not None:
        return True, suggestion
    return False, field


def check_numbers(field: str) -> bool:
    """True if any underscore-separated word of the name starts with a digit."""
    return any(_NUMBER_START.match(segment) for segment in field.split("_"))


def check_reserved_words(field: str) -> bool:
    """True if any underscore-separated word of the name is a reserved word."""
    return any(segment in _RESERVED_WORDS for segment in field.split("_"))


def check_prepositions(field: str) -> bool:
    """True if any underscore-separated word of the name is a preposition."""
    return any(segment in _PREPOSITIONS for segment in field.split("_"))


def aip122_driver(field: Field) -> list[MessageType]:
    """Apply the AIP-122 rules to a field."""
    messages = []
    flagged, suggestion = check_name_suffix(field.name)
    if flagged:
        messages.append(
            MessageType(
                (
                    "Error",
                    'Message: Parameters must not use the suffix "_name"\n',
                    f"Suggestion: Rename field {field.name} to {suggestion}\n",
                ),
                list(field.path),
            )
        )
    return messages


def aip140_driver(field: Field) -> list[MessageType]:
    """Apply the AIP-140 rules to a field."""
    name = field.name
    messages = []

    def add(text: str, suggestion: str = "") -> None:
        messages.append(MessageType(("Error", text, suggestion), list(field.path)))

    ok, suggestion = check_snake_case(name)
    if not ok:
        add(
            "Parameter names must follow case convention: lower_snake_case\n",
            f"Rename field {name} to {suggestion}\n",
        )
    flagged, suggestion = check_abbreviation(name)
    if flagged:
        add(
            "Parameters should use common abbreviations if applicable\n",
            f"Rename field {name} to {suggestion}\n",
        )
    if check_numbers(name):
        add(f"Parameters must not begin with a number: {name}\n")
    if check_reserved_words(name):
        add(f"Parameter names must not be reserved words: {name}\n")
    if check_prepositions(name):
        add(f"Parameter must not include prepositions in their names: {name}\n")
    return messages