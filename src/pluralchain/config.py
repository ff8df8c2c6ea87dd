"""
Chain configuration and the table of named chain extensions.

Every pluralizer carries one immutable `ChainConfig`. Extending a chain
copies the record, never mutating the parent, so any pluralizer can be the
root of many chains.
"""

__all__ = [
    "ChainConfig",
    "Extension",
    "EXTENSIONS",
]

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from .components import (
    COUNT,
    DEFAULT_COMPONENTS,
    PLURAL,
    SINGULAR,
    SUFFIX,
    Component,
    LiteralComponent,
)


@dataclass(frozen=True)
class ChainConfig:
    """Suffixes and ordered components of one pluralizer."""

    singular_suffix: Optional[str] = None
    plural_suffix: Optional[str] = None
    components: Tuple[Component, ...] = ()

    @property
    def effective_components(self) -> Tuple[Component, ...]:
        """Components to run; a bare chain falls back to the suffix alone."""
        return self.components or DEFAULT_COMPONENTS

    def extend(
        self,
        components: Tuple[Component, ...],
        **overrides: str,
    ) -> "ChainConfig":
        """
        Derive a new configuration with components appended.

        Args:
            components: Components added after the existing ones
            **overrides: `singular_suffix` and/or `plural_suffix` to overlay

        Returns:
            New ChainConfig; `self` is left untouched
        """
        return replace(
            self,
            components=self.components + tuple(components),
            **overrides,
        )


@dataclass(frozen=True)
class Extension:
    """Components appended and suffixes set by one named extension."""

    components: Tuple[Component, ...]
    overrides: Dict[str, str] = field(default_factory=dict)


# ====================================================================
# NAMED CHAIN EXTENSIONS
# ====================================================================

EXTENSIONS: Dict[str, Extension] = {
    # Count and multiplicity
    "num": Extension((COUNT,)),
    "singular": Extension((SINGULAR,)),
    "plural": Extension((PLURAL,)),
    # Suffixed words
    "s": Extension((SUFFIX,), {"plural_suffix": "s"}),
    "es": Extension((SUFFIX,), {"plural_suffix": "es"}),
    "y_ies": Extension((SUFFIX,), {"singular_suffix": "y", "plural_suffix": "ies"}),
    "is_es": Extension((SUFFIX,), {"singular_suffix": "is", "plural_suffix": "es"}),
    "same": Extension((SUFFIX,)),
    # Articles and verbs
    "a": Extension((LiteralComponent("a", None),)),
    "an": Extension((LiteralComponent("an", None),)),
    "a_some": Extension((LiteralComponent("a", "some"),)),
    "is_are": Extension((LiteralComponent("is", "are"),)),
    "is_a__are": Extension((LiteralComponent("is a", "are"),)),
    "has_have": Extension((LiteralComponent("has", "have"),)),
    "was_were": Extension((LiteralComponent("was", "were"),)),
}
