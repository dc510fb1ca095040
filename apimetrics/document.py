"""Reading and writing OpenAPI v2 and v3 descriptions in YAML or JSON."""

import yaml

__all__ = ["DocumentError", "parse_document", "yaml_value"]


class DocumentError(ValueError):
    """Raised when an API description cannot be read."""


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps scalar mapping keys as their literal text."""


def _construct_mapping(loader, node, deep=False):
    loader.flatten_mapping(node)
    result = {}
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode):
            key = key_node.value
        else:
            key = loader.construct_object(key_node, deep=True)
            try:
                hash(key)
            except TypeError as exc:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                ) from exc
        result[key] = loader.construct_object(value_node, deep=True)
    return result


_Loader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping)


def _require(mapping: dict, keys: tuple[str, ...], where: str) -> None:
    missing = [key for key in keys if key not in mapping]
    if missing:
        raise DocumentError(f"{where}: missing required key(s): {', '.join(missing)}")


def parse_document(data) -> dict:
    """Read an OpenAPI v2 or v3 description from YAML or JSON text or bytes."""
    try:
        root = yaml.load(data, Loader=_Loader)
    except yaml.YAMLError as exc:
        raise DocumentError(str(exc)) from exc
    if not isinstance(root, dict):
        raise DocumentError("document root must be a mapping")
    if "swagger" in root:
        _require(root, ("swagger", "info", "paths"), "$root")
    elif "openapi" in root:
        _require(root, ("openapi", "info", "paths"), "$root")
    else:
        raise DocumentError("unable to identify OpenAPI version")
    info = root["info"]
    if not isinstance(info, dict):
        raise DocumentError("$root.info: must be a mapping")
    _require(info, ("title", "version"), "$root.info")
    return root


def yaml_value(document: dict, comment: str = "") -> bytes:
    """Serialise a document as YAML, preceded by an optional comment."""
    lines = []
    if comment:
        for line in comment.splitlines():
            lines.append(line if line.startswith("#") else f"# {line}")
        lines.append("")
    header = "\n".join(lines) + ("\n" if lines else "")
    body = yaml.safe_dump(
        document, sort_keys=False, allow_unicode=True, default_flow_style=False
    )
    return (header + body).encode("utf-8")