"""
Command line entry point.

Usage:
    pluralchain demo
    pluralchain render is_are.num.s 3 lights
    pluralchain render "is_are.literal:definitely not.num.s" 5 lights
    pluralchain render a.y_ies 1 cherries --verbose
"""

__all__ = [
    "build_chain",
    "demo_sentences",
    "PluralChainCLI",
    "main",
]

import sys
from typing import List, Union

import fire
from loguru import logger

from .config import EXTENSIONS
from .pluralizer import Plural, Pluralizer

_LITERAL_PREFIX = "literal:"


def build_chain(chain: str, root: Pluralizer = Plural) -> Pluralizer:
    """
    Build a pluralizer from a dotted chain such as ``is_are.num.s``.

    A ``literal:<text>`` segment appends fixed text.

    Raises:
        ValueError: On an unknown segment
    """
    pluralizer = root
    for segment in chain.split("."):
        if segment.startswith(_LITERAL_PREFIX):
            pluralizer = pluralizer.literal(segment[len(_LITERAL_PREFIX):])
        elif segment in EXTENSIONS:
            pluralizer = getattr(pluralizer, segment)
        else:
            known = ", ".join(sorted(EXTENSIONS))
            raise ValueError(f"Unknown chain segment {segment!r} (known: {known})")
    return pluralizer


def demo_sentences() -> List[str]:
    """Example sentences for a handful of counts."""
    sentences = []
    for nephews in (["Tick", "Trick", "Track"], ["Joe"]):
        sentences.append(f"There {Plural.is_a__are.s(nephews=nephews)}.")
        sentences.append(
            f"Where {Plural.is_are(nephews=nephews)} the {Plural.s(nephews=nephews)}?"
        )

    for potatoes in (["boiled", "mash", "stuck in a stew"], ["Sir Spud"]):
        sentences.append(f"We're eating {Plural.a.es(potatoes=potatoes)} tonight.")

    for n in range(5):
        sentences.append(f"You have been dealt a hand of {Plural.num.s(n)('cards')}.")
        sentences.append(f"There {Plural.is_are.num.s(n)('lights')}.")

    sentences.append(f"I have {Plural.a.y_ies(1)('cherries')} at home!")

    for fruits in (["apple"], ["pear", "peach"]):
        sentences.append(
            f"I have {Plural.a_some.s(fruits)('pieces')} of "
            f"{Plural.s.singular(fruits=fruits)} at home!"
        )
        sentences.append(
            f"I have {Plural.a_some.literal('delicious').s(fruits=fruits)} at home!"
        )
    return sentences


class PluralChainCLI:
    """Render pluralized text from the command line."""

    def __init__(self, verbose: bool = False):
        logger.remove()
        logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
        if verbose:
            logger.enable("pluralchain")

    def demo(self) -> None:
        """Print example sentences."""
        for sentence in demo_sentences():
            print(sentence)

    def render(self, chain: str, count: Union[int, float], word: str) -> str:
        """
        Render CHAIN for COUNT using WORD as the reference plural.

        Args:
            chain: Dotted chain, e.g. ``is_are.num.s``
            count: Count to render
            word: Reference plural, e.g. ``lights``
        """
        logger.info(f"Rendering {chain!r} for {count!r} {word!r}")
        return build_chain(chain)(count)(word)


def main() -> None:
    fire.Fire(PluralChainCLI)
