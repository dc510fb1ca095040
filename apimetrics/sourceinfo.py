"""Locate the YAML node that holds a given token, for source line reporting."""

import re
from pathlib import Path

import yaml

__all__ = ["find_node", "find_node_in_text"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _sequence_index(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid sequence index: {text!r}")
    return int(text)


def _find(node, key_index: int, max_depth: int, keys: list[str]):
    if not isinstance(node, yaml.MappingNode):
        return None
    for key, value in node.value:
        if (
            key_index + 1 == max_depth
            and isinstance(value, yaml.ScalarNode)
            and value.value == keys[max_depth]
        ):
            return value
        if isinstance(key, yaml.ScalarNode) and key.value == keys[key_index]:
            if isinstance(value, yaml.SequenceNode):
                index = _sequence_index(keys[key_index + 1])
                if not 0 <= index < len(value.value):
                    raise IndexError(f"sequence index {index} out of range")
                return _find(value.value[index], key_index + 2, max_depth, keys)
            return _find(value, key_index + 1, max_depth, keys)
    return None


def find_node_in_text(text, keys, token):
    """Return the scalar node holding ``token`` at the end of ``keys``, or None.

    The node's ``start_mark`` gives its (zero-based) line and column.
    """
    root = yaml.compose(text, Loader=yaml.SafeLoader)
    if root is None:
        raise ValueError("empty YAML document")
    path = [*keys, token]
    return _find(root, 0, len(path) - 1, path)


def find_node(filename, keys, token):
    """Return the scalar node holding ``token`` in a YAML file, or None."""
    return find_node_in_text(Path(filename).read_text(encoding="utf-8"), keys, token)