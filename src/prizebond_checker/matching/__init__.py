"""Bond number normalization and matching."""

from .bond_matcher import compute_matches, normalize_bond_number, normalize_tokens

__all__ = [
    "compute_matches",
    "normalize_bond_number",
    "normalize_tokens",
]
