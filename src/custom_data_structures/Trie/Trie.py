"""This module represents the implementation of a Trie structure that's
used for exact word lookups and bounded prefix autocompletion.
"""

import threading
from typing import Optional

DEFAULT_SUGGESTIONS_LIMIT = 10


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children", "is_the_end_of_word")

    def __init__(self) -> None:
        """Initialize a new Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances.
            is_the_end_of_word (bool): Indicates whether this
            node marks the end of a valid word in the Trie.

        """
        self.children: dict[str, TrieNode] = {}
        self.is_the_end_of_word = False


class StringTrie:
    """Represents the string trie data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the Trie."""
        self.root = TrieNode()
        self._word_count = 0
        self._node_count = 1

    def __len__(self) -> int:
        """Return the number of distinct words stored in the trie."""
        return self._word_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    @property
    def node_count(self) -> int:
        """Total number of nodes in the trie, the root included."""
        return self._node_count

    def _walk(self, characters: str) -> Optional[TrieNode]:
        """Follow `characters` from the root.

        Args:
            characters (str): The characters to consume.

        Returns:
            Optional[TrieNode]: The node reached after consuming every
            character, or None if the path does not exist.

        """
        node = self.root
        for char in characters:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: Optional[str]) -> None:
        """Insert a new word into the String Trie structure.

        Empty or missing words are ignored. No trimming or case folding
        is done here.

        Args:
            word (Optional[str]): The word to be inserted into the Trie.

        """
        if not word:
            return

        node = self.root
        for char in word:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode()
                self._node_count += 1
            node = node.children[char]

        # Mark the end of the word, counting it only once
        if not node.is_the_end_of_word:
            node.is_the_end_of_word = True
            self._word_count += 1

    def search(self, word: Optional[str]) -> bool:
        """Check for the existence of a given word in the String
        Trie structure.

        Args:
            word (Optional[str]): The word to search for in the Trie.

        Returns:
            bool: True if the exact `word` is present
            in the trie as a complete word, False otherwise
            (including for an empty or missing word).

        """
        if not word:
            return False

        node = self._walk(word)
        # Return True only if the current node marks the end of a word
        return node is not None and node.is_the_end_of_word

    def starts_with(self, prefix: Optional[str]) -> bool:
        """Check whether any stored word begins with `prefix`.

        Args:
            prefix (Optional[str]): The prefix to look for.

        Returns:
            bool: True if at least one inserted word has `prefix`
            as a prefix, False otherwise.

        """
        if not prefix:
            return False
        return self._walk(prefix) is not None

    def suggestions(
        self,
        prefix: Optional[str],
        limit: int = DEFAULT_SUGGESTIONS_LIMIT,
    ) -> list[str]:
        """Collect up to `limit` stored words that start with `prefix`.

        The subtree under the prefix node is walked depth first with an
        explicit stack. Children are visited in sorted character order and
        a node is reported before its descendants, so the result is the
        first `limit` completions in lexicographic order. The prefix itself
        is part of the result when it is a stored word.

        Args:
            prefix (Optional[str]): The prefix to complete.
            limit (int): The maximum number of words to return.

        Returns:
            list[str]: The completions, empty if the prefix is empty,
            unknown, or `limit` is not positive.

        """
        if not prefix or limit <= 0:
            return []

        start = self._walk(prefix)
        if start is None:
            return []

        results: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_the_end_of_word:
                results.append(word)
                if len(results) >= limit:
                    break

            # Push in reverse so the smallest character is popped first
            for char in sorted(node.children, reverse=True):
                stack.append((node.children[char], word + char))

        return results


class SynchronizedStringTrie(StringTrie):
    """A StringTrie whose operations share one lock over the whole tree.

    Use it when the same trie is filled and queried from several threads.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()

    def insert(self, word: Optional[str]) -> None:
        with self._lock:
            super().insert(word)

    def search(self, word: Optional[str]) -> bool:
        with self._lock:
            return super().search(word)

    def starts_with(self, prefix: Optional[str]) -> bool:
        with self._lock:
            return super().starts_with(prefix)

    def suggestions(
        self,
        prefix: Optional[str],
        limit: int = DEFAULT_SUGGESTIONS_LIMIT,
    ) -> list[str]:
        with self._lock:
            return super().suggestions(prefix, limit)
