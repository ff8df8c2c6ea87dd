"""
pluralchain - Count-driven text for f-strings.

The package is organized into focused modules:

- components  Units producing one fragment each (literal, count, suffix,
              multiplicity override)
- config      ChainConfig record and the table of named extensions
- pluralizer  Pluralizer chain builder and the root `Plural`
- counting    to_count, format_count
- errors      SuffixMismatchError, AmbiguousKeyError
- cli         `pluralchain demo` / `pluralchain render` (requires fire)

Usage:
    from pluralchain import Plural

    f"There {Plural.is_are.num.s(n)('lights')}."
    f"There {Plural.is_a__are.s(nephews=nephews)}."
"""

__version__ = "0.1.0"

from loguru import logger

from pluralchain.components import (
    Multiplicity,
    Component,
    LiteralComponent,
    CountComponent,
    MultiplicityOverride,
    SuffixComponent,
)
from pluralchain.config import (
    ChainConfig,
    EXTENSIONS,
)
from pluralchain.counting import (
    to_count,
    format_count,
)
from pluralchain.errors import (
    PluralChainError,
    SuffixMismatchError,
    AmbiguousKeyError,
)
from pluralchain.pluralizer import (
    Pluralizer,
    Plural,
)

# Silent unless the application opts in with logger.enable("pluralchain")
logger.disable("pluralchain")

__all__ = [
    "__version__",
    # pluralizer
    "Pluralizer",
    "Plural",
    # components
    "Multiplicity",
    "Component",
    "LiteralComponent",
    "CountComponent",
    "MultiplicityOverride",
    "SuffixComponent",
    # config
    "ChainConfig",
    "EXTENSIONS",
    # counting
    "to_count",
    "format_count",
    # errors
    "PluralChainError",
    "SuffixMismatchError",
    "AmbiguousKeyError",
]
