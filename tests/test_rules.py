import pytest

from apimetrics.rules import (
    Field,
    MessageType,
    aip122_driver,
    aip140_driver,
    check_abbreviation,
    check_name_suffix,
    check_numbers,
    check_prepositions,
    check_reserved_words,
    check_snake_case,
    snake_case,
)


def test_name_suffix_flagged():
    assert check_name_suffix("author_name") == (True, "author")


def test_name_suffix_not_flagged():
    assert check_name_suffix("author") == (False, "author")


def test_snake_case_check_camel():
    assert check_snake_case("helloWorld") == (False, "hello_world")


def test_snake_case_check_already_snake():
    assert check_snake_case("hello_world") == (True, "hello_world")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("helloWorld", "hello_world"),
        ("HTTPServer", "http_server"),
        ("  Hello World ", "hello_world"),
        ("hello-world", "hello_world"),
        ("helloW", "hello_w"),
        ("", ""),
    ],
)
def test_snake_case(text, expected):
    assert snake_case(text) == expected


@pytest.mark.parametrize(
    "word, suggestion",
    [
        ("configuration", "config"),
        ("identifier", "id"),
        ("information", "info"),
        ("specification", "spec"),
        ("statistics", "stats"),
    ],
)
def test_abbreviation_flagged(word, suggestion):
    assert check_abbreviation(word) == (True, suggestion)


def test_abbreviation_not_flagged():
    assert check_abbreviation("supercalifrag") == (False, "supercalifrag")


@pytest.mark.parametrize(
    "name, expected",
    [("90th_percentile", True), ("hello_2nd_world", True), ("second", False)],
)
def test_numbers(name, expected):
    assert check_numbers(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("catch", True),
        ("all_except", True),
        ("export", True),
        ("interface", True),
        ("magic", False),
    ],
)
def test_reserved_words(name, expected):
    assert check_reserved_words(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("written_by", True),
        ("all_except", True),
        ("process_after", True),
        ("between_rocks_by_shore", True),
        ("no_preps_here", False),
    ],
)
def test_prepositions(name, expected):
    assert check_prepositions(name) is expected


def test_aip122_driver_reports_suffix():
    messages = aip122_driver(Field("author_name", ["paths", "/books"]))
    assert messages == [
        MessageType(
            (
                "Error",
                'Message: Parameters must not use the suffix "_name"\n',
                "Suggestion: Rename field author_name to author\n",
            ),
            ["paths", "/books"],
        )
    ]


def test_aip122_driver_clean_name():
    assert aip122_driver(Field("author", ["x"])) == []


def test_aip140_driver_camel_case():
    messages = aip140_driver(Field("helloWorld", ["p"]))
    assert messages == [
        MessageType(
            (
                "Error",
                "Parameter names must follow case convention: lower_snake_case\n",
                "Rename field helloWorld to hello_world\n",
            ),
            ["p"],
        )
    ]


def test_aip140_driver_reserved_and_preposition():
    messages = aip140_driver(Field("for", ["q"]))
    assert [m.message for m in messages] == [
        ("Error", "Parameter names must not be reserved words: for\n", ""),
        ("Error", "Parameter must not include prepositions in their names: for\n", ""),
    ]


def test_aip140_driver_abbreviation_and_number():
    messages = aip140_driver(Field("configuration", []))
    assert [m.message[1] for m in messages] == [
        "Parameters should use common abbreviations if applicable\n"
    ]
    assert messages[0].message[2] == "Rename field configuration to config\n"
    numbered = aip140_driver(Field("2nd_value", []))
    assert [m.message[1] for m in numbered] == [
        "Parameters must not begin with a number: 2nd_value\n"
    ]


def test_aip140_driver_clean_name():
    assert aip140_driver(Field("page_size", [])) == []


def test_driver_copies_path():
    path = ["a", "b"]
    messages = aip122_driver(Field("user_name", path))
    messages[0].path.append("c")
    assert path == ["a", "b"]