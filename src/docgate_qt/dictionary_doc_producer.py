"""Word lookup used as the documentation producer in the demo editor."""


class DictionaryDocProducer:
    """Maps words to short documentation strings."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries) if entries else {}

    def add_entry(self, word: str, text: str) -> None:
        """Add or replace the documentation for a word."""
        self._entries[word] = text

    def documentation_for(self, word: str) -> str | None:
        """
        Look up documentation for a word.

        Args:
            word: The word under the cursor, possibly empty

        Returns:
            Documentation text, or None if the word is unknown
        """
        if not word:
            return None

        return self._entries.get(word)
