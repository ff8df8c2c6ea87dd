"""
Chain components.

Each component turns a count and a common prefix into at most one text
fragment. Components are immutable and shared between chains, so a single
instance of each stateless component is created here and reused.
"""

__all__ = [
    "Multiplicity",
    "Component",
    "LiteralComponent",
    "CountComponent",
    "MultiplicityOverride",
    "SuffixComponent",
    "COUNT",
    "SINGULAR",
    "PLURAL",
    "SUFFIX",
    "DEFAULT_COMPONENTS",
]

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union

from .constants import CONFIG
from .counting import format_count

if TYPE_CHECKING:
    from .config import ChainConfig

LiteralInfo = Union[str, Sequence[Optional[str]]]


class Multiplicity(Enum):
    """Grammatical number a component resolves against."""

    SINGULAR = "singular"
    PLURAL = "plural"


class Component(ABC):
    """
    Base class for chain components.

    Subclasses implement `resolve`. A component may also announce a
    multiplicity, which the chain driver hands to the component right
    before it.
    """

    @abstractmethod
    def resolve(
        self,
        count: Union[int, float],
        common_prefix: str,
        config: "ChainConfig",
        override: Optional[Multiplicity] = None,
    ) -> Optional[str]:
        pass

    def announce(self) -> Optional[Multiplicity]:
        """Multiplicity forced on the previous component, if any."""
        return None


@dataclass(frozen=True)
class LiteralComponent(Component):
    """Fixed text for each multiplicity; `None` contributes nothing."""

    singular: Optional[str] = None
    plural: Optional[str] = None

    @classmethod
    def from_info(cls, literal_info: LiteralInfo) -> "LiteralComponent":
        """
        Build a literal from a bare string or a (singular, plural) pair.

        Example:
            >>> LiteralComponent.from_info("my")
            LiteralComponent(singular='my', plural='my')
            >>> LiteralComponent.from_info(["a", None])
            LiteralComponent(singular='a', plural=None)
        """
        if isinstance(literal_info, str):
            return cls(literal_info, literal_info)
        singular, plural = literal_info
        return cls(singular, plural)

    def resolve(self, count, common_prefix, config, override=None):
        if count == 1:
            return self.singular
        return self.plural


@dataclass(frozen=True)
class CountComponent(Component):
    """The count itself."""

    def resolve(self, count, common_prefix, config, override=None):
        return format_count(count)


@dataclass(frozen=True)
class MultiplicityOverride(Component):
    """Forces the previous component to a multiplicity; renders nothing."""

    multiplicity: Multiplicity

    def resolve(self, count, common_prefix, config, override=None):
        return None

    def announce(self) -> Optional[Multiplicity]:
        return self.multiplicity


@dataclass(frozen=True)
class SuffixComponent(Component):
    """Common prefix plus the configured singular or plural suffix."""

    def resolve(self, count, common_prefix, config, override=None):
        if override is Multiplicity.SINGULAR:
            count = CONFIG["override_singular_count"]
        elif override is Multiplicity.PLURAL:
            count = CONFIG["override_plural_count"]

        if count == 1:
            suffix = config.singular_suffix
            default = CONFIG["default_singular_suffix"]
        else:
            suffix = config.plural_suffix
            default = CONFIG["default_plural_suffix"]
        return common_prefix + (suffix if suffix is not None else default)


COUNT = CountComponent()
SINGULAR = MultiplicityOverride(Multiplicity.SINGULAR)
PLURAL = MultiplicityOverride(Multiplicity.PLURAL)
SUFFIX = SuffixComponent()

DEFAULT_COMPONENTS: Tuple[Component, ...] = (SUFFIX,)
