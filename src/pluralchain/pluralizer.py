"""
Chainable pluralizer.

A `Pluralizer` holds an immutable `ChainConfig`. Touching a named property
(`.num`, `.s`, `.is_are`, ...) returns a new pluralizer with one more
component, and calling the pluralizer renders the chain:

    >>> Plural.a.s(1)("pencils")
    'a pencil'
    >>> Plural.is_a__are.s(nephews=["Tick", "Trick", "Track"])
    'are nephews'
"""

__all__ = [
    "Pluralizer",
    "Plural",
]

from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from loguru import logger

from .components import LiteralComponent, LiteralInfo
from .config import EXTENSIONS, ChainConfig
from .constants import CONFIG
from .counting import Countable, to_count
from .errors import AmbiguousKeyError, SuffixMismatchError

Finisher = Callable[[Union[str, Sequence[str]]], str]

_MISSING = object()


class Pluralizer:
    """
    Immutable chain of components plus the suffixes they render with.

    Call it in one of two ways:

    - deferred: ``pluralizer(count)`` returns a finisher taking the plural
      word written at the call site, e.g. ``Plural.num.s(n)("cards")``
    - immediate: ``pluralizer(cards=hand)`` or ``pluralizer({"cards": hand})``
      takes the plural word from the single key and returns the text
    """

    __slots__ = ("_config",)

    def __init__(self, config: Optional[ChainConfig] = None):
        self._config = config if config is not None else ChainConfig()

    def __repr__(self) -> str:
        return f"Pluralizer({self._config!r})"

    @property
    def config(self) -> ChainConfig:
        return self._config

    # ----------------------------------------------------------------
    # Resolution
    # ----------------------------------------------------------------

    def join(self, count: Union[int, float], common_prefix: str) -> str:
        """
        Run every component and join the fragments they produce.

        Component ``i`` is resolved with whatever component ``i + 1``
        announces; the last component has no successor.

        Args:
            count: Count the components reason about
            common_prefix: Word stem shared by singular and plural forms

        Returns:
            Non-empty fragments joined by single spaces
        """
        components = self._config.effective_components
        parts: List[str] = []
        for i, component in enumerate(components):
            override = None
            if i + 1 < len(components):
                override = components[i + 1].announce()
            part = component.resolve(count, common_prefix, self._config, override)
            if part:
                parts.append(part)

        text = CONFIG["separator"].join(parts)
        logger.debug(f"Resolved {count!r} with prefix {common_prefix!r} to {text!r}")
        return text

    def extract_prefix(self, plural: str) -> str:
        """
        Strip the configured plural suffix from a reference plural.

        Raises:
            TypeError: If the word is not a string
            SuffixMismatchError: If the word does not end with the suffix

        Example:
            >>> Plural.y_ies.extract_prefix("cherries")
            'cherr'
        """
        if not isinstance(plural, str):
            raise TypeError(f"Expected the plural word as a string, got {plural!r}")
        suffix = self._config.plural_suffix or CONFIG["default_plural_suffix"]
        if not plural.endswith(suffix):
            logger.debug(f"Rejecting {plural!r}: no {suffix!r} suffix")
            raise SuffixMismatchError(plural, suffix)
        return plural[: len(plural) - len(suffix)]

    def with_count(self, countable: Countable) -> Finisher:
        """
        Deferred form: fix the count, wait for the reference plural.

        The returned finisher accepts the plural word itself or a one-element
        sequence holding it.

        Example:
            >>> Plural.num.s(0)("cards")
            '0 cards'
            >>> Plural.num.s(1)(["cards"])
            '1 card'
        """
        count = to_count(countable)

        def finish(plural: Union[str, Sequence[str]]) -> str:
            if isinstance(plural, str):
                word = plural
            elif isinstance(plural, Sequence) and len(plural) > 0:
                word = plural[0]
            else:
                raise TypeError(
                    "Expected the plural word or a one-element sequence of strings, "
                    f"got {plural!r}"
                )
            return self.join(count, self.extract_prefix(word))

        return finish

    def resolve(self, named: Mapping[str, Countable]) -> str:
        """
        Immediate form: count and prefix both come from a single-key mapping.

        Args:
            named: Mapping from the plural word to its countable value

        Returns:
            The rendered chain

        Raises:
            AmbiguousKeyError: If the mapping does not have exactly one key
            SuffixMismatchError: If the key does not end with the plural suffix

        Example:
            >>> Plural.is_are.num.s({"lights": 4})
            'are 4 lights'
        """
        keys = list(named)
        if len(keys) != 1:
            raise AmbiguousKeyError(keys)
        word = keys[0]
        return self.join(to_count(named[word]), self.extract_prefix(word))

    def __call__(self, countable: Any = _MISSING, /, **named: Countable):
        if countable is _MISSING:
            return self.resolve(named)
        if named:
            raise TypeError(
                "Pass either a countable or a single named countable, not both"
            )
        if isinstance(countable, Mapping):
            return self.resolve(countable)
        return self.with_count(countable)

    # ----------------------------------------------------------------
    # Chain extensions
    # ----------------------------------------------------------------

    def _extend(self, name: str) -> "Pluralizer":
        extension = EXTENSIONS[name]
        return Pluralizer(
            self._config.extend(extension.components, **extension.overrides)
        )

    def literal(self, literal_info: LiteralInfo) -> "Pluralizer":
        """
        Append fixed text.

        Args:
            literal_info: Text used for both forms, or a (singular, plural)
                pair where either side may be None

        Example:
            >>> Plural.literal(["a", "multiple"]).s(4)("plants")
            'multiple plants'
        """
        return Pluralizer(
            self._config.extend((LiteralComponent.from_info(literal_info),))
        )

    @property
    def num(self) -> "Pluralizer":
        """Append the count."""
        return self._extend("num")

    @property
    def singular(self) -> "Pluralizer":
        """Force the previous component to its singular form."""
        return self._extend("singular")

    @property
    def plural(self) -> "Pluralizer":
        """Force the previous component to its plural form."""
        return self._extend("plural")

    @property
    def s(self) -> "Pluralizer":
        """card / cards"""
        return self._extend("s")

    @property
    def es(self) -> "Pluralizer":
        """potato / potatoes"""
        return self._extend("es")

    @property
    def y_ies(self) -> "Pluralizer":
        """cherry / cherries"""
        return self._extend("y_ies")

    @property
    def is_es(self) -> "Pluralizer":
        """thesis / theses"""
        return self._extend("is_es")

    @property
    def same(self) -> "Pluralizer":
        """fish / fish"""
        return self._extend("same")

    @property
    def a(self) -> "Pluralizer":
        return self._extend("a")

    @property
    def an(self) -> "Pluralizer":
        return self._extend("an")

    @property
    def a_some(self) -> "Pluralizer":
        return self._extend("a_some")

    @property
    def is_are(self) -> "Pluralizer":
        return self._extend("is_are")

    @property
    def is_a__are(self) -> "Pluralizer":
        return self._extend("is_a__are")

    @property
    def has_have(self) -> "Pluralizer":
        return self._extend("has_have")

    @property
    def was_were(self) -> "Pluralizer":
        return self._extend("was_were")


Plural = Pluralizer()
