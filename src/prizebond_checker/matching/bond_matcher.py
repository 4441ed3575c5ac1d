"""
Normalization and matching of bond numbers.

Bond numbers are always 6 digits. A raw token is reduced to the first run of
exactly six digits it contains; tokens without one are discarded.
"""

import logging
import re
from typing import Iterable, List, Optional
from ..models.bond_result import PRIZE_LABEL, BondMatch, MatchResult

logger = logging.getLogger(__name__)

BOND_NUMBER_PATTERN = re.compile(r'(?<!\d)\d{6}(?!\d)', re.ASCII)


def normalize_bond_number(token: object) -> Optional[str]:
    """
    Extract the canonical bond number from a raw token.

    Args:
        token: Raw token, converted to string first

    Returns:
        The first 6-digit run in the token, or None if there is none
    """
    match = BOND_NUMBER_PATTERN.search(str(token))
    return match.group(0) if match else None


def normalize_tokens(tokens: Iterable[object]) -> List[str]:
    """Normalize tokens in order, dropping those without a bond number."""
    normalized = (normalize_bond_number(token) for token in tokens)
    return [bond for bond in normalized if bond is not None]


def compute_matches(user_tokens: Iterable[object], draw_tokens: Iterable[object]) -> MatchResult:
    """
    Find the user's bond numbers that appear in the draw.

    Args:
        user_tokens: Raw tokens from the user's list
        draw_tokens: Raw tokens from the draw list

    Returns:
        MatchResult with matches in user order (duplicates kept) and the
        number of valid user bond numbers
    """
    user_bonds = normalize_tokens(user_tokens)
    draw_bonds = set(normalize_tokens(draw_tokens))

    matches = [
        BondMatch(bond_number=bond, prize=PRIZE_LABEL)
        for bond in user_bonds
        if bond in draw_bonds
    ]

    result = MatchResult(matches=matches, total_user_bonds=len(user_bonds))

    logger.info(f"Total user bonds: {result.total_user_bonds}")
    logger.info(f"Matches: {result.match_count}")

    return result
