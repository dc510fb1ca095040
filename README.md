# apimetrics

A library for measuring and checking API descriptions written as OpenAPI v2,
OpenAPI v3 or Google Discovery documents. Documents are handled as plain
Python mappings, as read from YAML or JSON.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `apimetrics.document`

- `parse_document(data)` reads an OpenAPI v2 (`swagger`) or v3 (`openapi`)
  description from YAML or JSON text or bytes and returns it as a `dict`.
  Mapping keys are kept as their literal text. It raises `DocumentError`
  (a `ValueError`) if the text cannot be parsed, the root is not a mapping,
  the version cannot be identified, or `info`, `paths`, `info.title` or
  `info.version` is missing.
- `yaml_value(document, comment="")` serialises a document as UTF-8 YAML
  bytes, keeping key order. Each line of `comment` is written first as a
  `#` comment.

### `apimetrics.rules`

Naming rules for parameter names.

- `check_name_suffix(name)`: `(True, stripped)` if the name ends in `_name`.
- `check_snake_case(field)`: whether the name is lower snake case, with the
  suggested form (built by `snake_case(text)`).
- `check_abbreviation(field)`: whether the name is one of `configuration`,
  `identifier`, `information`, `specification`, `statistics`, with the
  suggested abbreviation.
- `check_numbers(field)`, `check_reserved_words(field)`,
  `check_prepositions(field)`: whether any underscore-separated word starts
  with a digit, is a reserved word, or is a preposition.
- `aip122_driver(field)` and `aip140_driver(field)` apply these checks to a
  `Field(name, path)` and return a list of `MessageType(message, path)`,
  where `message` is a `(level, text, suggestion)` tuple.

### `apimetrics.lint`

- `aip_lint_v2(document)` and `aip_lint_v3(document)` apply both rule sets to
  every parameter of a parsed document (path operations, and for v3 also
  `components.parameters`). Each returns `(Linter, count)`; a `Linter` holds
  a list of `LintMessage(type, message, keys, suggestion, line)`.
- `messages_from_openapi_validator(report)` and
  `lint_openapi_validator(filename)` convert the JSON report of the
  openapi-validator tool into lint messages.
- `parse_spectral_output(lines)` and `lint_spectral(filename)` convert the
  text output of the spectral linter; a malformed line raises `ValueError`.

### `apimetrics.linters`

- `description_linter_for(document)` returns a `DescriptionLinterV2` for a
  `swagger` document or a `DescriptionLinterV3` for an `openapi` document,
  and raises `ValueError` otherwise. `run()` on the v2 linter returns a
  `PluginMessage` with level `Level.WARNING` and code `NODESCRIPTION` for
  each operation, parameter, response schema, definition and property that
  has no description. The v3 linter reports nothing.
- `check_paths(document)` returns one `Level.INFO` message with code `PATH`
  for every path of a v2 or v3 document.

### `apimetrics.vocabulary`

- `Vocabulary` holds sorted `WordCount(word, count)` lists for `schemas`,
  `operations`, `parameters` and `properties`. Build one with
  `Vocabulary.from_counters(...)`; `is_empty()` and `term_count()` describe it.
- `union(vocabularies)` adds counts together; `intersection(vocabularies)`
  keeps words found in all, summing counts; `difference(vocabularies)` keeps
  words of the first found in none of the others. `intersection` and
  `difference` raise `ValueError` on an empty list.
- `filter_common(vocabularies)` returns, for each vocabulary, the words no
  other vocabulary uses.
- `version_history(vocabularies, version_names, directory)` compares each
  vocabulary with the next and returns a `VersionHistory` of `Version`
  entries with new and deleted terms and their counts.
- `write_csv(vocabulary, filename="")` writes lines of `group,"word",count`
  (to `vocabulary-operation.csv` if no name is given).
- `gather_files_from_directory(directory)` lists paths under a directory
  whose path contains `vocabulary.pb`.

### `apimetrics.extract`

`vocabulary_from_openapi_v2(document)`, `vocabulary_from_openapi_v3(document)`
and `vocabulary_from_discovery(document)` build a `Vocabulary` from a parsed
document. A Discovery document can be loaded with `json.load`.

### `apimetrics.sourceinfo`

`find_node(filename, keys, token)` and `find_node_in_text(text, keys, token)`
follow a path of keys (sequence positions given as numbers in text) through a
YAML document and return the `yaml` scalar node holding `token`, or `None`.
Its `start_mark.line` is the zero-based line number.

## Example

```python
from apimetrics.document import parse_document
from apimetrics.extract import vocabulary_from_openapi_v3
from apimetrics.lint import aip_lint_v3
from apimetrics.vocabulary import write_csv

with open("petstore.yaml", "rb") as handle:
    document = parse_document(handle.read())

vocabulary = vocabulary_from_openapi_v3(document)
write_csv(vocabulary, "petstore-vocabulary.csv")

linter, count = aip_lint_v3(document)
for message in linter.messages:
    print(message.type, message.message.strip(), "/".join(message.keys))
```

## What it does not do

- There is no command-line tool; everything is called from Python.
- It does not compile documents into typed models or run external plugin
  programs; it works on the parsed mappings directly.
- It does not read or write binary protocol-buffer files. Vocabularies,
  version histories and lint results are returned as Python objects only;
  `gather_files_from_directory` finds `vocabulary.pb` paths but nothing here
  loads them.
- `parse_document` does not accept Discovery documents.