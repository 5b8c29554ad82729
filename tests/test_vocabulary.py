import pytest

from cyberkit.vocabulary import (
    Vocabulary,
    vocabulary_from_bytes,
    vocabulary_from_file,
)


def test_new_assigns_ids_in_order():
    items = ["word1", "word2", "word3"]
    voc = Vocabulary(items)
    for i, item in enumerate(items):
        assert voc.id(item) == i


@pytest.mark.parametrize(
    "term, prefix",
    [
        ("", ""),
        ("aabb", "aa"),
        ("aaabbbb", "aaa"),
        ("bbb", ""),
        ("bbbbb", "bbbb"),
    ],
)
def test_longest_prefix(term, prefix):
    voc = Vocabulary(["a", "aa", "aaa", "bbbb"])
    assert voc.longest_prefix(term) == prefix


def test_bytes_round_trip():
    v1 = Vocabulary(["foo", "bar", "baz"])
    v2 = vocabulary_from_bytes(v1.to_bytes())
    assert v2 == v1
    assert v2.items() == ["foo", "bar", "baz"]
    assert v2.id("baz") == 2


def test_bytes_round_trip_unicode():
    v1 = Vocabulary(["città", "▁hello", "🤔"])
    assert vocabulary_from_bytes(v1.to_bytes()).items() == v1.items()


@pytest.mark.parametrize("data", [b"not json", b'{"a": 1}', b"[1, 2]", b"\xff\xfe"])
def test_from_bytes_rejects_bad_data(data):
    with pytest.raises(ValueError):
        vocabulary_from_bytes(data)


def test_add_existing_term_keeps_id():
    voc = Vocabulary(["foo", "bar"])
    assert voc.add("foo") == 0
    assert voc.add("qux") == 2
    assert voc.items() == ["foo", "bar", "qux"]


def test_duplicates_in_constructor_are_ignored():
    voc = Vocabulary(["x", "y", "x"])
    assert voc.items() == ["x", "y"]
    assert len(voc) == 2


def test_unknown_term():
    voc = Vocabulary(["foo"])
    assert voc.id("bar") is None
    with pytest.raises(KeyError, match="term `bar` not found"):
        voc.must_id("bar")


def test_must_id_known_term():
    assert Vocabulary(["foo", "bar"]).must_id("bar") == 1


def test_size_is_highest_id():
    assert Vocabulary().size() == -1
    assert Vocabulary(["a", "b", "c"]).size() == 2


def test_term_lookup_stops_below_size():
    voc = Vocabulary(["a", "b", "c"])
    assert voc.term(0) == "a"
    assert voc.term(1) == "b"
    assert voc.term(2) is None
    assert voc.term(-1) is None


def test_must_term():
    voc = Vocabulary(["a", "b", "c"])
    assert voc.must_term(1) == "b"
    with pytest.raises(KeyError, match="id not found"):
        voc.must_term(5)


def test_contains():
    voc = Vocabulary(["a"])
    assert "a" in voc
    assert "b" not in voc


def test_from_file(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_bytes(b"[PAD]\n[UNK]\r\nhello\n##lo")
    voc = vocabulary_from_file(path)
    assert voc.items() == ["[PAD]", "[UNK]", "hello", "##lo"]
    assert voc.id("##lo") == 3


def test_from_file_keeps_empty_lines_once(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_text("a\n\nb\n\n", encoding="utf-8")
    assert vocabulary_from_file(path).items() == ["a", "", "b"]


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        vocabulary_from_file(tmp_path / "absent.txt")