"""Lint API descriptions by AIP rules and convert reports of external linters."""

import json
import re
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .rules import Field, MessageType, aip122_driver, aip140_driver

__all__ = [
    "LintMessage",
    "Linter",
    "aip_lint_v2",
    "aip_lint_v3",
    "messages_from_openapi_validator",
    "lint_openapi_validator",
    "parse_spectral_output",
    "lint_spectral",
]

_V2_METHODS = ("get", "put", "post", "delete", "patch")
_V3_METHODS = ("get", "post", "put", "patch", "delete")

# (group, key, level, path given as a dotted string)
_VALIDATOR_SECTIONS = (
    ("errors", "parameters-ibm", "Error", False),
    ("errors", "paths-ibm", "Error", False),
    ("errors", "paths", "Error", True),
    ("errors", "schema-ibm", "Error", False),
    ("errors", "form-data", "Error", True),
    ("errors", "walker-ibm", "Error", False),
    ("warnings", "operation-ids", "Warning", True),
    ("warnings", "operations-shared", "Warning", True),
    ("warnings", "refs", "Warning", True),
    ("warnings", "schema-ibm", "Warning", False),
    ("warnings", "paths-ibm", "Warning", False),
    ("warnings", "walker-ibm", "Warning", False),
    ("warnings", "circular-references-ibm", "Warning", True),
    ("warnings", "operation", "Warning", True),
    ("warnings", "responses", "Warning", False),
    ("warnings", "parameters-ibm", "Warning", False),
)

_SPECTRAL_SEPARATOR = re.compile(r"[]: *]")
_OCTAL = re.compile(r"[+-]?0[0-7_]+")


@dataclass
class LintMessage:
    """One finding of a linter."""

    type: str
    message: str
    keys: list[str] = field(default_factory=list)
    suggestion: str = ""
    line: int = 0


@dataclass
class Linter:
    """The collected findings of a linter run."""

    messages: list[LintMessage] = field(default_factory=list)


def _entries(value) -> Iterable[tuple[str, object]]:
    if isinstance(value, Mapping):
        return value.items()
    return ()


def _is_reference(value) -> bool:
    return isinstance(value, Mapping) and "$ref" in value


def _path_items(document: Mapping) -> Iterator[tuple[str, Mapping]]:
    for name, item in _entries(document.get("paths")):
        if isinstance(name, str) and name.startswith("/") and isinstance(item, Mapping):
            yield name, item


def _parameter_name(parameter: Mapping) -> str:
    name = parameter.get("name", "")
    return "" if name is None else str(name)


def _to_lint_messages(found: Iterable[MessageType]) -> list[LintMessage]:
    return [
        LintMessage(
            type=item.message[0],
            message=item.message[1],
            keys=list(item.path),
            suggestion=item.message[2],
        )
        for item in found
    ]


def _run_rules(fields: Iterable[Field]) -> tuple[Linter, int]:
    found: list[MessageType] = []
    for each in fields:
        found.extend(aip122_driver(each))
        found.extend(aip140_driver(each))
    return Linter(messages=_to_lint_messages(found)), len(found)


def _fields_v2(document: Mapping) -> Iterator[Field]:
    for name, item in _path_items(document):
        for method in _V2_METHODS:
            operation = item.get(method)
            if not isinstance(operation, Mapping):
                continue
            for index, parameter in enumerate(operation.get("parameters") or ()):
                if isinstance(parameter, Mapping) and not _is_reference(parameter):
                    yield Field(
                        _parameter_name(parameter),
                        ["paths", name, method, "parameters", str(index), "name"],
                    )


def _fields_v3(document: Mapping) -> Iterator[Field]:
    components = document.get("components")
    if isinstance(components, Mapping):
        for name, parameter in _entries(components.get("parameters")):
            if isinstance(parameter, Mapping) and not _is_reference(parameter):
                yield Field(
                    _parameter_name(parameter),
                    ["components", "parameters", name, "name"],
                )
    for name, item in _path_items(document):
        for method in _V3_METHODS:
            operation = item.get(method)
            if not isinstance(operation, Mapping):
                continue
            for parameter in operation.get("parameters") or ():
                if isinstance(parameter, Mapping) and not _is_reference(parameter):
                    yield Field(
                        _parameter_name(parameter),
                        ["paths", name, method, "parameters", "name"],
                    )


def aip_lint_v2(document: Mapping) -> tuple[Linter, int]:
    """Apply the AIP rules to the parameters of an OpenAPI v2 document."""
    return _run_rules(_fields_v2(document))


def aip_lint_v3(document: Mapping) -> tuple[Linter, int]:
    """Apply the AIP rules to the parameters of an OpenAPI v3 document."""
    return _run_rules(_fields_v3(document))


def _entry_keys(path, dotted: bool) -> list[str]:
    if dotted:
        return str(path or "").split(".")
    if path is None:
        return []
    if isinstance(path, str):
        raise ValueError(f"expected a list of path keys, got {path!r}")
    return [str(key) for key in path]


def messages_from_openapi_validator(report: Mapping) -> list[LintMessage]:
    """Convert a parsed openapi-validator JSON report into lint messages."""
    messages = []
    for group, key, level, dotted in _VALIDATOR_SECTIONS:
        section = report.get(group) or {}
        for entry in section.get(key) or ():
            messages.append(
                LintMessage(
                    type=level,
                    message=str(entry.get("message", "")),
                    keys=_entry_keys(entry.get("path"), dotted),
                    line=int(entry.get("line") or 0),
                )
            )
    return messages


def lint_openapi_validator(filename) -> Linter:
    """Read an openapi-validator JSON report file into a Linter."""
    report = json.loads(Path(filename).read_text(encoding="utf-8"))
    if not isinstance(report, Mapping):
        raise ValueError("openapi-validator report must be a JSON object")
    return Linter(messages=messages_from_openapi_validator(report))


def _parse_line_number(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        if _OCTAL.fullmatch(text):
            return int(text.replace("_", ""), 8)
        return 0


def parse_spectral_output(lines: Iterable[str]) -> list[LintMessage]:
    """Convert lines of spectral text output into lint messages."""
    messages = []
    for line in lines:
        parts: Sequence[str] = _SPECTRAL_SEPARATOR.split(line, maxsplit=5)
        if len(parts) < 6:
            raise ValueError(f"malformed spectral output line: {line!r}")
        messages.append(
            LintMessage(
                type=parts[3],
                message=parts[5],
                line=_parse_line_number(parts[1]),
            )
        )
    return messages


def _read_lines(filename) -> list[str]:
    with open(filename, encoding="utf-8", newline="") as source:
        text = source.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def lint_spectral(filename) -> Linter:
    """Read a spectral text report file into a Linter."""
    return Linter(messages=parse_spectral_output(_read_lines(filename)))