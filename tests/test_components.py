"""Tests for individual chain components."""

import pytest

from pluralchain.components import (
    COUNT,
    DEFAULT_COMPONENTS,
    PLURAL,
    SINGULAR,
    SUFFIX,
    Component,
    LiteralComponent,
    Multiplicity,
)
from pluralchain.config import ChainConfig

S_CONFIG = ChainConfig(plural_suffix="s")
Y_IES_CONFIG = ChainConfig(singular_suffix="y", plural_suffix="ies")


class TestLiteralComponent:
    def test_picks_text_by_count(self):
        component = LiteralComponent("is", "are")
        assert component.resolve(1, "", S_CONFIG) == "is"
        assert component.resolve(0, "", S_CONFIG) == "are"
        assert component.resolve(2, "", S_CONFIG) == "are"
        assert component.resolve(0.5, "", S_CONFIG) == "are"

    def test_missing_text_produces_no_fragment(self):
        component = LiteralComponent("a", None)
        assert component.resolve(1, "", S_CONFIG) == "a"
        assert component.resolve(4, "", S_CONFIG) is None

    def test_from_bare_string(self):
        assert LiteralComponent.from_info("my") == LiteralComponent("my", "my")

    def test_from_pair(self):
        assert LiteralComponent.from_info(("a", None)) == LiteralComponent("a", None)
        assert LiteralComponent.from_info(["a", "some"]) == LiteralComponent("a", "some")

    def test_never_announces(self):
        assert LiteralComponent("a", None).announce() is None


def test_count_component_formats_count():
    assert COUNT.resolve(3, "card", S_CONFIG) == "3"
    assert COUNT.resolve(float("inf"), "card", S_CONFIG) == "Infinity"
    assert COUNT.announce() is None


def test_multiplicity_overrides_render_nothing():
    assert SINGULAR.resolve(1, "card", S_CONFIG) is None
    assert PLURAL.resolve(1, "card", S_CONFIG) is None
    assert SINGULAR.announce() is Multiplicity.SINGULAR
    assert PLURAL.announce() is Multiplicity.PLURAL


class TestSuffixComponent:
    def test_appends_suffix_by_count(self):
        assert SUFFIX.resolve(1, "card", S_CONFIG) == "card"
        assert SUFFIX.resolve(0, "card", S_CONFIG) == "cards"
        assert SUFFIX.resolve(2, "card", S_CONFIG) == "cards"

    def test_singular_and_plural_suffixes(self):
        assert SUFFIX.resolve(1, "cherr", Y_IES_CONFIG) == "cherry"
        assert SUFFIX.resolve(5, "cherr", Y_IES_CONFIG) == "cherries"

    def test_missing_suffixes_default_to_empty(self):
        assert SUFFIX.resolve(1, "fish", ChainConfig()) == "fish"
        assert SUFFIX.resolve(2, "fish", ChainConfig()) == "fish"

    @pytest.mark.parametrize("count", [0, 1, 2, 7, float("inf")])
    def test_override_wins_over_count(self, count):
        assert SUFFIX.resolve(count, "card", S_CONFIG, Multiplicity.SINGULAR) == "card"
        assert SUFFIX.resolve(count, "card", S_CONFIG, Multiplicity.PLURAL) == "cards"


def test_base_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_default_components_render_the_word():
    assert DEFAULT_COMPONENTS == (SUFFIX,)
