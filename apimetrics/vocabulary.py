"""Vocabularies of API descriptions and set operations over them."""

import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "WordCount",
    "Vocabulary",
    "Version",
    "VersionHistory",
    "union",
    "intersection",
    "difference",
    "filter_common",
    "version_history",
    "write_csv",
    "gather_files_from_directory",
]

_CATEGORIES = ("schemas", "operations", "parameters", "properties")


@dataclass(frozen=True)
class WordCount:
    """A word and the number of times it was seen."""

    word: str
    count: int


def _sorted_counts(counts: Mapping[str, int] | None) -> list[WordCount]:
    if not counts:
        return []
    return [WordCount(word, int(counts[word])) for word in sorted(counts)]


@dataclass
class Vocabulary:
    """Words used in an API description, grouped by where they appear."""

    schemas: list[WordCount] = field(default_factory=list)
    operations: list[WordCount] = field(default_factory=list)
    parameters: list[WordCount] = field(default_factory=list)
    properties: list[WordCount] = field(default_factory=list)

    @classmethod
    def from_counters(cls, schemas=None, operations=None, parameters=None, properties=None):
        """Build a vocabulary from word-to-count mappings, words sorted."""
        return cls(
            schemas=_sorted_counts(schemas),
            operations=_sorted_counts(operations),
            parameters=_sorted_counts(parameters),
            properties=_sorted_counts(properties),
        )

    def is_empty(self) -> bool:
        """True when no category holds any word."""
        return not (self.schemas or self.operations or self.parameters or self.properties)

    def term_count(self) -> int:
        """Number of distinct words, counted separately in each category."""
        return sum(len(counts) for counts in _unpack(self).values())


@dataclass
class Version:
    """Terms added and removed between two versions of an API."""

    new_terms: Vocabulary
    deleted_terms: Vocabulary
    name: str
    new_term_count: int
    deleted_term_count: int


@dataclass
class VersionHistory:
    """The sequence of changes across the versions of an API."""

    versions: list[Version] = field(default_factory=list)
    name: str = ""


def _unpack(vocabulary: Vocabulary, into: dict[str, dict[str, int]] | None = None):
    counts = into if into is not None else {name: {} for name in _CATEGORIES}
    for name in _CATEGORIES:
        table = counts[name]
        for entry in getattr(vocabulary, name):
            table[entry.word] = table.get(entry.word, 0) + entry.count
    return counts


def _pack(counts: dict[str, dict[str, int]]) -> Vocabulary:
    return Vocabulary.from_counters(**counts)


def _first_and_rest(vocabularies: Sequence[Vocabulary], operation: str):
    if not vocabularies:
        raise ValueError(f"{operation} needs at least one vocabulary")
    return vocabularies[0], vocabularies[1:]


def union(vocabularies: Iterable[Vocabulary]) -> Vocabulary:
    """Combine vocabularies, adding up the counts of shared words."""
    counts = {name: {} for name in _CATEGORIES}
    for vocabulary in vocabularies:
        _unpack(vocabulary, counts)
    return _pack(counts)


def intersection(vocabularies: Sequence[Vocabulary]) -> Vocabulary:
    """Words found in every vocabulary, with their counts added up."""
    first, rest = _first_and_rest(vocabularies, "intersection")
    counts = _unpack(first)
    for other in rest:
        narrowed = {}
        for name in _CATEGORIES:
            current = counts[name]
            table: dict[str, int] = {}
            for entry in getattr(other, name):
                if entry.word in current:
                    table[entry.word] = (
                        table.get(entry.word, 0) + current[entry.word] + entry.count
                    )
            narrowed[name] = table
        counts = narrowed
    return _pack(counts)


def difference(vocabularies: Sequence[Vocabulary]) -> Vocabulary:
    """Words of the first vocabulary that appear in none of the others."""
    first, rest = _first_and_rest(vocabularies, "difference")
    counts = _unpack(first)
    for other in rest:
        for name in _CATEGORIES:
            table = counts[name]
            for entry in getattr(other, name):
                table.pop(entry.word, None)
    return _pack(counts)


def filter_common(vocabularies: Sequence[Vocabulary]) -> list[Vocabulary]:
    """For each vocabulary, the words that no other vocabulary uses."""
    return [
        difference([vocabulary, *vocabularies[:i], *vocabularies[i + 1 :]])
        for i, vocabulary in enumerate(vocabularies)
    ]


def _version(old: Vocabulary, new: Vocabulary, new_name: str) -> Version:
    new_terms = difference([new, old])
    deleted_terms = difference([old, new])
    return Version(
        new_terms=new_terms,
        deleted_terms=deleted_terms,
        name=new_name,
        new_term_count=new_terms.term_count(),
        deleted_term_count=deleted_terms.term_count(),
    )


def version_history(
    vocabularies: Sequence[Vocabulary], version_names: Sequence[str], directory: str
) -> VersionHistory:
    """Compare each vocabulary with the one after it."""
    if len(version_names) < len(vocabularies):
        raise ValueError("every vocabulary needs a version name")
    versions = [
        _version(vocabularies[i], vocabularies[i + 1], version_names[i + 1])
        for i in range(len(vocabularies) - 1)
    ]
    return VersionHistory(versions=versions, name=directory)


def write_csv(vocabulary: Vocabulary, filename: str = "") -> None:
    """Write a vocabulary as lines of group,"word",count."""
    target = filename or "vocabulary-operation.csv"
    with open(target, "w", encoding="utf-8", newline="") as out:
        for group in ("schemas", "properties", "operations", "parameters"):
            for entry in getattr(vocabulary, group):
                out.write(f'{group},"{entry.word}",{entry.count}\n')


def _walk(path: str) -> Iterator[str]:
    yield path
    if os.path.isdir(path) and not os.path.islink(path):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def gather_files_from_directory(directory) -> list[str]:
    """Paths under a directory whose path contains "vocabulary.pb"."""
    root = os.fspath(directory)
    os.lstat(root)
    return [path for path in _walk(root) if "vocabulary.pb" in path]