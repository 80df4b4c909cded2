import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from src.custom_data_structures.Trie.Trie import (
    StringTrie,
    SynchronizedStringTrie,
)
from src.dictionary.loader import (
    ResourceUnavailableError,
    load_dictionary,
    load_words,
)
from tests.sample_words import WORDS


def test_load_words_inserts_every_line(word_file):
    data_trie = StringTrie()

    assert load_words(data_trie, word_file) == len(WORDS)
    assert len(data_trie) == len(WORDS)
    for word in WORDS:
        assert data_trie.search(word) is True


def test_load_words_strips_only_line_terminators(tmp_path):
    data_path = tmp_path / "list.txt"
    data_path.write_bytes(b"cat\r\ndog\n  bird  \nlast")

    data_trie = StringTrie()
    load_words(data_trie, data_path)

    assert data_trie.search("cat") is True
    assert data_trie.search("dog") is True
    assert data_trie.search("  bird  ") is True
    assert data_trie.search("bird") is False
    assert data_trie.search("last") is True
    assert data_trie.search("cat\r") is False


def test_load_words_skips_empty_lines(tmp_path):
    data_path = tmp_path / "list.txt"
    data_path.write_text("cat\n\n\ndog\n", encoding="utf-8")

    data_trie = StringTrie()

    assert load_words(data_trie, data_path) == 4
    assert len(data_trie) == 2


def test_load_words_duplicates_count_once(tmp_path):
    data_path = tmp_path / "list.txt"
    data_path.write_text("cat\ncat\ncar\n", encoding="utf-8")

    data_trie = StringTrie()
    load_words(data_trie, data_path)

    assert len(data_trie) == 2


def test_load_words_missing_file():
    with pytest.raises(ResourceUnavailableError) as excinfo:
        load_words(StringTrie(), Path("/non/existent/list.txt"))

    assert excinfo.value.words_loaded == 0
    assert excinfo.value.data_path == Path("/non/existent/list.txt")
    assert "No such file or directory" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_words_keeps_words_read_before_a_decode_error(tmp_path):
    data_path = tmp_path / "list.txt"
    # The invalid byte sits well past the first read buffer
    good_lines = "".join(f"word{i}\n" for i in range(2000))
    data_path.write_bytes(good_lines.encode("utf-8") + b"bad\xff\n")

    data_trie = StringTrie()
    with pytest.raises(ResourceUnavailableError) as excinfo:
        load_words(data_trie, data_path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert excinfo.value.words_loaded == len(data_trie)
    assert data_trie.search("word0") is True


def test_load_dictionary_builds_a_trie(word_file):
    data_trie = load_dictionary(word_file)

    assert isinstance(data_trie, StringTrie)
    assert data_trie.suggestions("car") == ["car", "cart", "carton"]


def test_load_dictionary_fills_a_given_trie(word_file):
    synchronized = SynchronizedStringTrie()

    assert load_dictionary(word_file, synchronized) is synchronized
    assert synchronized.search("dodge") is True


def test_load_dictionary_reports_missing_file(tmp_path, capsys, caplog):
    missing = tmp_path / "missing.txt"

    with caplog.at_level(logging.ERROR):
        data_trie = load_dictionary(missing)

    assert len(data_trie) == 0
    assert data_trie.suggestions("a") == []
    captured = capsys.readouterr()
    assert "Error reading file:" in captured.err
    assert str(missing) in captured.err
    assert "Failed to load word list" in caplog.text


def test_load_dictionary_keeps_partial_load(word_file, capsys):
    data_trie = StringTrie()
    data_trie.insert("preloaded")

    with patch.object(
        Path,
        "open",
        side_effect=PermissionError("Permission denied"),
    ):
        result = load_dictionary(word_file, data_trie)

    assert result is data_trie
    assert data_trie.search("preloaded") is True
    assert "Permission denied" in capsys.readouterr().err


def test_load_dictionary_logs_success(word_file, caplog):
    with caplog.at_level(logging.INFO):
        load_dictionary(word_file)

    assert f"({len(WORDS)} words)" in caplog.text
