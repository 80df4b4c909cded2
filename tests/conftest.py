import logging

import pytest

from src.custom_data_structures.Trie.Trie import StringTrie
from src.dictionary.logger import teardown_logging
from tests.sample_words import WORDS


@pytest.fixture
def word_file(tmp_path):
    """Write the sample words to a newline-delimited file."""
    file_path = tmp_path / "list.txt"
    with file_path.open("w", encoding="utf-8") as f:
        for word in WORDS:
            f.write(f"{word}\n")
    return file_path


@pytest.fixture
def trie():
    """A trie holding the sample words."""
    data_trie = StringTrie()
    for word in WORDS:
        data_trie.insert(word)
    return data_trie


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any logging configuration a test installs."""
    level = logging.getLogger().level
    yield
    teardown_logging()
    logging.getLogger().setLevel(level)
