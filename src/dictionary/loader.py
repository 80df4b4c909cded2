"""Load newline-delimited word lists into a trie."""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

from src.custom_data_structures.Trie.Trie import StringTrie


class ResourceUnavailableError(Exception):
    """Raised when the word list can't be opened or read."""

    def __init__(self, data_path: Path, words_loaded: int, reason: str):
        super().__init__(reason)
        self.data_path = data_path
        self.words_loaded = words_loaded
        self.reason = reason


def load_words(trie: StringTrie, data_path: Path) -> int:
    """Insert every line of the data file into the trie.

    Only the trailing line terminator is removed from each line, other
    whitespace is kept as part of the word.

    Args:
        trie (StringTrie): The trie to fill.
        data_path (Path): The path of the word list.

    Raises:
        ResourceUnavailableError: If the file does not exist or an error
        occurs while reading it. Lines read before the error stay in
        the trie.

    Returns:
        int: The number of lines read.

    """
    lines_read = 0
    try:
        with data_path.open("r", encoding="utf-8") as file:
            for line in file:
                trie.insert(line.rstrip("\r\n"))
                lines_read += 1

    except FileNotFoundError as e:
        raise ResourceUnavailableError(
            data_path,
            lines_read,
            f"{data_path} (No such file or directory)",
        ) from e

    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailableError(data_path, lines_read, str(e)) from e

    return lines_read


def load_dictionary(
    data_path: Path,
    trie: Optional[StringTrie] = None,
) -> StringTrie:
    """Build a trie from the word list, reporting read failures.

    A missing or unreadable word list does not stop the program: the
    failure is reported on stderr and the trie is returned with whatever
    was loaded before it.

    Args:
        data_path (Path): The path of the word list.
        trie (Optional[StringTrie]): An existing trie to fill. A new
        StringTrie is created when omitted.

    Returns:
        StringTrie: The loaded trie.

    """
    if trie is None:
        trie = StringTrie()

    start_time = time.perf_counter()
    try:
        lines_read = load_words(trie, data_path)
    except ResourceUnavailableError as e:
        logging.exception(
            f"Failed to load word list '{e.data_path}' after "
            f"{e.words_loaded} lines",
        )
        print(f"Error reading file: {e.reason}", file=sys.stderr)
        return trie

    duration = (time.perf_counter() - start_time) * 1000
    logging.info(
        f"Loaded {lines_read} lines ({len(trie)} words) from '{data_path}' "
        f"in {duration:.2f} ms",
    )
    return trie
