"""Errors raised while deriving a common prefix."""

__all__ = [
    "PluralChainError",
    "SuffixMismatchError",
    "AmbiguousKeyError",
]

from typing import Sequence


class PluralChainError(ValueError):
    """Base class for pluralchain errors."""


class SuffixMismatchError(PluralChainError):
    """Reference word does not end with the configured plural suffix."""

    def __init__(self, word: str, suffix: str):
        self.word = word
        self.suffix = suffix
        super().__init__(
            f'Reference plural ("{word}") does not end with plural suffix ("{suffix}").'
        )


class AmbiguousKeyError(PluralChainError):
    """Named countable does not have exactly one key."""

    def __init__(self, keys: Sequence[str]):
        self.keys = tuple(keys)
        super().__init__(
            f"Expected exactly one named countable, got {len(self.keys)}: {list(self.keys)}"
        )
