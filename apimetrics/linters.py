"""Linters that report on OpenAPI descriptions: missing descriptions and paths."""

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

__all__ = [
    "Level",
    "PluginMessage",
    "DescriptionLinterV2",
    "DescriptionLinterV3",
    "description_linter_for",
    "check_paths",
]

_V2_DESCRIBED_METHODS = ("get", "post", "put", "delete")
_NON_BODY_LOCATIONS = frozenset({"header", "formData", "query", "path"})
_NO_DESCRIPTION = "NODESCRIPTION"


class Level(enum.IntEnum):
    """Severity of a linter message."""

    UNKNOWN = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


@dataclass
class PluginMessage:
    """A message reported by a linter about a place in an API description."""

    level: Level
    code: str
    text: str
    keys: list[str] = field(default_factory=list)


def _entries(value) -> Iterable[tuple[str, object]]:
    if isinstance(value, Mapping):
        return value.items()
    return ()


def _is_reference(value) -> bool:
    return isinstance(value, Mapping) and "$ref" in value


def _path_items(document: Mapping) -> Iterator[tuple[str, object]]:
    for name, item in _entries(document.get("paths")):
        if isinstance(name, str) and name.startswith("/"):
            yield name, item


def _undescribed(value: Mapping) -> bool:
    return not value.get("description")


def _warning(text: str, keys: list[str]) -> PluginMessage:
    return PluginMessage(Level.WARNING, _NO_DESCRIPTION, text, list(keys))


class DescriptionLinterV2:
    """Reports operations, parameters, responses and definitions of an
    OpenAPI v2 document that have no description."""

    def __init__(self, document: Mapping):
        self.document = document

    def run(self) -> list[PluginMessage]:
        """Analyse the document and return the messages found."""
        messages: list[PluginMessage] = []
        for name, item in _path_items(self.document):
            if not isinstance(item, Mapping):
                continue
            for method in _V2_DESCRIBED_METHODS:
                operation = item.get(method)
                if isinstance(operation, Mapping):
                    messages.extend(self._operation(["paths", name, method], operation))
        for name, definition in _entries(self.document.get("definitions")):
            if isinstance(definition, Mapping):
                messages.extend(self._definition(["definitions", name], definition))
        return messages

    @staticmethod
    def _operation(keys: list[str], operation: Mapping) -> list[PluginMessage]:
        messages = []
        if _undescribed(operation):
            messages.append(_warning("Operation has no description.", keys))
        for parameter in operation.get("parameters") or ():
            if not isinstance(parameter, Mapping) or _is_reference(parameter):
                continue
            location = parameter.get("in")
            if location == "body" or location in _NON_BODY_LOCATIONS:
                if _undescribed(parameter):
                    messages.append(
                        _warning(
                            "Parameter has no description.",
                            [*keys, "responses", str(parameter.get("name") or "")],
                        )
                    )
        for code, response in _entries(operation.get("responses")):
            if isinstance(code, str) and code.startswith("x-"):
                continue
            if not isinstance(response, Mapping) or _is_reference(response):
                continue
            schema = response.get("schema")
            if isinstance(schema, Mapping) and _undescribed(schema):
                messages.append(
                    _warning("Response has no description.", [*keys, "responses", str(code)])
                )
        return messages

    @staticmethod
    def _definition(keys: list[str], definition: Mapping) -> list[PluginMessage]:
        messages = []
        if _undescribed(definition):
            messages.append(_warning("Definition has no description.", keys))
        for name, schema in _entries(definition.get("properties")):
            if isinstance(schema, Mapping) and _undescribed(schema):
                messages.append(
                    _warning("Property has no description.", [*keys, "properties", name])
                )
        return messages


class DescriptionLinterV3:
    """Description linter for OpenAPI v3 documents; it reports nothing yet."""

    def __init__(self, document: Mapping):
        self.document = document

    def run(self) -> list[PluginMessage]:
        """Return the messages found, which are always none."""
        return []


def description_linter_for(document: Mapping):
    """Choose the description linter that suits the document's OpenAPI version."""
    if "swagger" in document:
        return DescriptionLinterV2(document)
    if "openapi" in document:
        return DescriptionLinterV3(document)
    raise ValueError("unable to identify OpenAPI version")


def check_paths(document: Mapping) -> list[PluginMessage]:
    """Report every path of an OpenAPI v2 or v3 document."""
    return [
        PluginMessage(Level.INFO, "PATH", name, ["paths", name])
        for name, _ in _path_items(document)
    ]