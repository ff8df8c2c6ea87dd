"""
Constants shared across the chain engine.

All formatting choices are centralized here for easy maintenance.
"""

__all__ = ["CONFIG", "NON_FINITE_SPELLINGS"]

from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    "separator": " ",  # Joins the fragments produced by a chain
    "default_singular_suffix": "",  # Used when a chain sets no singular suffix
    "default_plural_suffix": "",  # Used when a chain sets no plural suffix
    "override_singular_count": 1,  # Effective count forced by `.singular`
    "override_plural_count": 2,  # Effective count forced by `.plural`
}

# Spellings for counts that have no decimal representation
NON_FINITE_SPELLINGS: Dict[str, str] = {
    "inf": "Infinity",
    "-inf": "-Infinity",
    "nan": "NaN",
}
