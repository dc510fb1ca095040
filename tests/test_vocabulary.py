import os

import pytest

from apimetrics.vocabulary import (
    Vocabulary,
    WordCount,
    difference,
    filter_common,
    gather_files_from_directory,
    intersection,
    union,
    version_history,
    write_csv,
)


def counts(words, numbers):
    return [WordCount(w, n) for w, n in zip(words, numbers)]


def make_v1():
    return Vocabulary(
        schemas=counts(["heelo", "random", "funcName", "google"], [1, 2, 3, 4]),
        properties=counts(["Hello", "dog", "funcName", "cat"], [4, 3, 2, 1]),
        operations=counts(["countGreetings", "print", "funcName"], [12, 11, 4]),
        parameters=counts(["name", "id", "tag", "suggester"], [5, 1, 1, 15]),
    )


def make_v2():
    return Vocabulary(
        schemas=counts(["Hello", "random", "status", "google"], [5, 6, 1, 4]),
        properties=counts(["cat", "dog", "thing"], [4, 3, 2]),
        operations=counts(["countPrint", "print", "funcName"], [17, 12, 19]),
        parameters=counts(["name", "id", "tag", "suggester"], [5, 1, 1, 15]),
    )


SAMPLE_CSV = (
    'schemas,"heelo",1\n'
    'schemas,"random",2\n'
    'schemas,"funcName",3\n'
    'schemas,"google",4\n'
    'properties,"Hello",4\n'
    'properties,"dog",3\n'
    'properties,"funcName",2\n'
    'properties,"cat",1\n'
    'operations,"countGreetings",12\n'
    'operations,"print",11\n'
    'operations,"funcName",4\n'
    'parameters,"name",5\n'
    'parameters,"id",1\n'
    'parameters,"tag",1\n'
    'parameters,"suggester",15\n'
)


def test_union():
    reference = Vocabulary(
        schemas=counts(
            ["Hello", "funcName", "google", "heelo", "random", "status"], [5, 3, 8, 1, 8, 1]
        ),
        properties=counts(["Hello", "cat", "dog", "funcName", "thing"], [4, 5, 6, 2, 2]),
        operations=counts(["countGreetings", "countPrint", "funcName", "print"], [12, 17, 23, 23]),
        parameters=counts(["id", "name", "suggester", "tag"], [2, 10, 30, 2]),
    )
    assert union([make_v1(), make_v2()]) == reference


def test_intersection():
    reference = Vocabulary(
        schemas=counts(["google", "random"], [8, 8]),
        properties=counts(["cat", "dog"], [5, 6]),
        operations=counts(["funcName", "print"], [23, 23]),
        parameters=counts(["id", "name", "suggester", "tag"], [2, 10, 30, 2]),
    )
    assert intersection([make_v1(), make_v2()]) == reference


def test_difference():
    reference = Vocabulary(
        schemas=counts(["funcName", "heelo"], [3, 1]),
        properties=counts(["Hello", "funcName"], [4, 2]),
        operations=counts(["countGreetings"], [12]),
    )
    assert difference([make_v1(), make_v2()]) == reference


def test_filter_common():
    reference = Vocabulary(
        schemas=counts(["funcName", "heelo"], [3, 1]),
        properties=counts(["Hello", "funcName"], [4, 2]),
        operations=counts(["countGreetings"], [12]),
    )
    reference2 = Vocabulary(
        schemas=counts(["Hello", "status"], [5, 1]),
        properties=counts(["thing"], [2]),
        operations=counts(["countPrint"], [17]),
    )
    result = filter_common([make_v1(), make_v2()])
    assert result == [reference, reference2]


def test_write_csv_sample_contents(tmp_path):
    target = tmp_path / "sample.csv"
    write_csv(make_v1(), str(target))
    assert target.read_text() == SAMPLE_CSV


def test_write_csv_default_name(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    write_csv(make_v1(), "")
    named = tmp_path / "named.csv"
    write_csv(make_v1(), str(named))
    default_target = work / "vocabulary-operation.csv"
    assert sorted(os.listdir(work)) == ["vocabulary-operation.csv"]
    assert default_target.read_text() == named.read_text()
    assert default_target.read_text() == SAMPLE_CSV


def test_write_csv_named_file(tmp_path):
    target = tmp_path / "out.csv"
    write_csv(Vocabulary(parameters=counts(["x"], [7])), str(target))
    assert target.read_text() == 'parameters,"x",7\n'


def test_from_counters_sorts_words():
    vocab = Vocabulary.from_counters(schemas={"b": 2, "a": 1})
    assert vocab.schemas == [WordCount("a", 1), WordCount("b", 2)]
    assert vocab.operations == []


def test_is_empty_and_term_count():
    assert Vocabulary().is_empty()
    assert Vocabulary().term_count() == 0
    assert not make_v1().is_empty()
    assert make_v1().term_count() == 15


def test_term_count_merges_duplicates():
    vocab = Vocabulary(schemas=counts(["a", "a"], [1, 2]), properties=counts(["a"], [1]))
    assert vocab.term_count() == 2


def test_version_history():
    history = version_history([make_v1(), make_v2()], ["v1", "v2"], "api")
    assert history.name == "api"
    assert len(history.versions) == 1
    version = history.versions[0]
    assert version.name == "v2"
    assert version.new_terms == Vocabulary(
        schemas=counts(["Hello", "status"], [5, 1]),
        properties=counts(["thing"], [2]),
        operations=counts(["countPrint"], [17]),
    )
    assert version.new_term_count == 4
    assert version.deleted_term_count == 5


def test_version_history_single_vocabulary():
    assert version_history([make_v1()], ["v1"], "d").versions == []


def test_empty_inputs():
    assert union([]).is_empty()
    with pytest.raises(ValueError):
        intersection([])
    with pytest.raises(ValueError):
        difference([])


def test_gather_files_from_directory(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "vocabulary.pb").write_bytes(b"")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "other.pb").write_bytes(b"")
    (tmp_path / "c" / "d").mkdir(parents=True)
    (tmp_path / "c" / "d" / "vocabulary.pb").write_bytes(b"")
    found = gather_files_from_directory(str(tmp_path))
    assert found == [
        os.path.join(str(tmp_path), "a", "vocabulary.pb"),
        os.path.join(str(tmp_path), "c", "d", "vocabulary.pb"),
    ]


def test_gather_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        gather_files_from_directory(str(tmp_path / "missing"))