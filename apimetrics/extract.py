"""Collect the vocabulary of Discovery and OpenAPI v2/v3 descriptions."""

from collections import Counter
from collections.abc import Iterable, Mapping

from .vocabulary import Vocabulary

__all__ = [
    "vocabulary_from_discovery",
    "vocabulary_from_openapi_v2",
    "vocabulary_from_openapi_v3",
]

_OPENAPI_METHODS = ("get", "post", "put", "patch", "delete")


def _new_counts() -> dict[str, Counter]:
    return {
        "schemas": Counter(),
        "operations": Counter(),
        "parameters": Counter(),
        "properties": Counter(),
    }


def _entries(value) -> Iterable[tuple[str, object]]:
    """The (name, value) pairs of a mapping; nothing for anything else."""
    if isinstance(value, Mapping):
        return value.items()
    return ()


def _is_reference(value) -> bool:
    return isinstance(value, Mapping) and "$ref" in value


def _path_items(document: Mapping) -> Iterable[Mapping]:
    """Path items of an OpenAPI document, skipping extensions and other keys."""
    for name, item in _entries(document.get("paths")):
        if isinstance(name, str) and name.startswith("/") and isinstance(item, Mapping):
            yield item


def _operations(path_item: Mapping) -> Iterable[Mapping]:
    for method in _OPENAPI_METHODS:
        operation = path_item.get(method)
        if isinstance(operation, Mapping):
            yield operation


def _count_operation(operation: Mapping, counts: dict[str, Counter]) -> None:
    operation_id = operation.get("operationId") or ""
    if operation_id:
        counts["operations"][str(operation_id)] += 1
    for item in operation.get("parameters") or ():
        if isinstance(item, Mapping) and not _is_reference(item):
            counts["parameters"][str(item.get("name") or "")] += 1


# Discovery documents


def _discovery_schema(schema, counts: dict[str, Counter]) -> None:
    if not isinstance(schema, Mapping):
        return
    for name, value in _entries(schema.get("properties")):
        counts["properties"][name] += 1
        _discovery_schema(value, counts)


def _discovery_parameter(parameter, counts: dict[str, Counter]) -> None:
    if not isinstance(parameter, Mapping):
        return
    for name, value in _entries(parameter.get("properties")):
        counts["properties"][name] += 1
        _discovery_schema(value, counts)


def _discovery_method(method, counts: dict[str, Counter]) -> None:
    if not isinstance(method, Mapping):
        return
    method_id = method.get("id") or ""
    if method_id:
        counts["operations"][str(method_id)] += 1
    for name, value in _entries(method.get("parameters")):
        counts["parameters"][name] += 1
        _discovery_parameter(value, counts)


def _discovery_resource(resource, counts: dict[str, Counter]) -> None:
    if not isinstance(resource, Mapping):
        return
    for name, value in _entries(resource.get("methods")):
        # Method names of resources are recorded among the properties.
        counts["properties"][name] += 1
        _discovery_method(value, counts)
    for _, value in _entries(resource.get("resources")):
        _discovery_resource(value, counts)


def vocabulary_from_discovery(document: Mapping) -> Vocabulary:
    """Collect the vocabulary of a Discovery document."""
    counts = _new_counts()
    for name, value in _entries(document.get("parameters")):
        counts["parameters"][name] += 1
        _discovery_parameter(value, counts)
    for name, value in _entries(document.get("schemas")):
        counts["schemas"][name] += 1
        _discovery_schema(value, counts)
    for _, value in _entries(document.get("methods")):
        _discovery_method(value, counts)
    for _, value in _entries(document.get("resources")):
        _discovery_resource(value, counts)
    return Vocabulary.from_counters(**counts)


# OpenAPI v2


def vocabulary_from_openapi_v2(document: Mapping) -> Vocabulary:
    """Collect the vocabulary of an OpenAPI v2 document."""
    counts = _new_counts()
    for name, schema in _entries(document.get("definitions")):
        counts["schemas"][name] += 1
        if isinstance(schema, Mapping):
            for prop, _ in _entries(schema.get("properties")):
                counts["properties"][prop] += 1
    for path_item in _path_items(document):
        for operation in _operations(path_item):
            _count_operation(operation, counts)
    return Vocabulary.from_counters(**counts)


# OpenAPI v3


def _v3_components(components: Mapping, counts: dict[str, Counter]) -> None:
    for _, parameter in _entries(components.get("parameters")):
        if isinstance(parameter, Mapping) and not _is_reference(parameter):
            counts["parameters"][str(parameter.get("name") or "")] += 1
    for name, schema in _entries(components.get("schemas")):
        counts["schemas"][name] += 1
        if isinstance(schema, Mapping) and not _is_reference(schema):
            for prop, _ in _entries(schema.get("properties")):
                counts["properties"][prop] += 1
    for name, _ in _entries(components.get("responses")):
        counts["schemas"][name] += 1


def vocabulary_from_openapi_v3(document: Mapping) -> Vocabulary:
    """Collect the vocabulary of an OpenAPI v3 document."""
    counts = _new_counts()
    components = document.get("components")
    if isinstance(components, Mapping):
        _v3_components(components, counts)
    for path_item in _path_items(document):
        for operation in _operations(path_item):
            _count_operation(operation, counts)
    return Vocabulary.from_counters(**counts)