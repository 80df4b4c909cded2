"""Interactive read-eval loop answering word and prefix queries."""

import sys
import time
from datetime import datetime
from typing import Optional, TextIO

from src.custom_data_structures.Trie.Trie import (
    DEFAULT_SUGGESTIONS_LIMIT,
    StringTrie,
)

from .logger import log

PROMPT = "Enter a word to search (or press Enter to exit): "


class InputStreamClosedError(Exception):
    """Raised when the input ends before the user asked to exit."""


def format_result(query: str, found: bool, suggestions: list[str]) -> str:
    """Build the message shown for one query.

    Args:
        query (str): The query typed by the user.
        found (bool): Whether the query is a stored word.
        suggestions (list[str]): The completions of the query.

    Returns:
        str: The message to print.

    """
    if found:
        return f"Word found: {query}"
    return f"Word not found! Did you mean: [{', '.join(suggestions)}]"


class QueryShell:
    """Read one query per line and print whether it is a stored word."""

    def __init__(
        self,
        trie: StringTrie,
        limit: int = DEFAULT_SUGGESTIONS_LIMIT,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        log_details: bool = False,
    ) -> None:
        self.trie = trie
        self.limit = limit
        self.input_stream = sys.stdin if input_stream is None else input_stream
        self.output_stream = (
            sys.stdout if output_stream is None else output_stream
        )
        self.log_details = log_details

    def evaluate(self, query: str) -> tuple[bool, list[str]]:
        """Look the query up in the trie.

        The query counts as found only when it appears among its own
        completions.

        Args:
            query (str): The query typed by the user.

        Returns:
            tuple[bool, list[str]]: Whether the query was found, and its
            completions.

        """
        start_time = time.perf_counter()
        suggestions = self.trie.suggestions(query, self.limit)
        found = bool(suggestions) and query in suggestions

        if self.log_details:
            duration = (time.perf_counter() - start_time) * 1000
            log(
                datetime.now().isoformat(timespec="seconds"),
                query,
                found,
                len(suggestions),
                duration,
            )

        return found, suggestions

    def read_query(self) -> str:
        """Prompt for and read one query.

        Raises:
            InputStreamClosedError: If the input has no more lines.

        Returns:
            str: The line typed by the user, without its terminator.

        """
        self.output_stream.write(PROMPT)
        self.output_stream.flush()

        line = self.input_stream.readline()
        if not line:
            raise InputStreamClosedError("Input stream closed before exit")
        return line.rstrip("\r\n")

    def run(self) -> int:
        """Answer queries until an empty line is entered.

        Raises:
            InputStreamClosedError: If the input ends first.

        Returns:
            int: The exit code, 0 once the user leaves the loop.

        """
        while True:
            query = self.read_query()
            if not query:
                return 0

            found, suggestions = self.evaluate(query)
            print(
                format_result(query, found, suggestions),
                file=self.output_stream,
            )
