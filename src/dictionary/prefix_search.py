"""Different prefix-search algorithms over a word-list file, used for
benchmarking the trie and for cross-checking its completions.

Every function returns the first `limit` distinct words of the file that
start with `prefix`, in lexicographic order.
"""

import bisect
from pathlib import Path

from src.custom_data_structures.Trie.Trie import StringTrie


def _read_words(data_path: Path) -> set[str]:
    with data_path.open("r", encoding="utf-8") as file:
        return {
            word for word in (line.rstrip("\r\n") for line in file) if word
        }


def linear_scan_suggestions(
    data_path: Path,
    prefix: str,
    limit: int,
) -> list[str]:
    """Scan every line of the file for words starting with `prefix`.

    Args:
        data_path (Path): The path of the word list.
        prefix (str): The prefix to complete.
        limit (int): The maximum number of words to return.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while performing the search.

    Returns:
        list[str]: The matching words.

    """
    if not prefix or limit <= 0:
        return []

    try:
        matches = {
            word for word in _read_words(data_path) if word.startswith(prefix)
        }
        return sorted(matches)[:limit]

    except FileNotFoundError as e:
        # Raise an error if the file does not exist
        raise FileNotFoundError(f"File not found: {data_path}") from e

    except Exception as e:
        # Raise a generic exception for any other errors
        raise Exception(f"An error occurred: {e!s}") from e


def binary_search_suggestions(
    data_path: Path,
    prefix: str,
    limit: int,
) -> list[str]:
    """Sort the words of the file and bisect to the first match.

    Words sharing a prefix are contiguous in sorted order, so the matches
    are read forward from the insertion point of `prefix`.

    Args:
        data_path (Path): The path of the word list.
        prefix (str): The prefix to complete.
        limit (int): The maximum number of words to return.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while performing the search.

    Returns:
        list[str]: The matching words.

    """
    if not prefix or limit <= 0:
        return []

    try:
        sorted_words = sorted(_read_words(data_path))
        index = bisect.bisect_left(sorted_words, prefix)

        matches: list[str] = []
        while (
            index < len(sorted_words)
            and len(matches) < limit
            and sorted_words[index].startswith(prefix)
        ):
            matches.append(sorted_words[index])
            index += 1
        return matches

    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {data_path}") from e

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e


def trie_suggestions(data_path: Path, prefix: str, limit: int) -> list[str]:
    """Insert all the lines of the data file into a trie and complete
    `prefix` from it.

    Args:
        data_path (Path): The path of the word list.
        prefix (str): The prefix to complete.
        limit (int): The maximum number of words to return.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.
        Exception: If an error occurs while performing the search.

    Returns:
        list[str]: The matching words.

    """
    data_trie = StringTrie()
    try:
        with data_path.open("r", encoding="utf-8") as file:
            for line in file:
                data_trie.insert(line.rstrip("\r\n"))

        return data_trie.suggestions(prefix, limit)

    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {data_path}") from e

    except Exception as e:
        raise Exception(f"An error occurred: {e!s}") from e
