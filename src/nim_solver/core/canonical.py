"""
Canonical state keys for memo table lookups.

Nim positions are equivalent under any reordering of the piles, so the
key is the sorted multiset of pile sizes plus the player to move. Keys
are plain tuples and hash by value.
"""

from typing import Sequence, Tuple

CanonicalKey = Tuple[Tuple[int, ...], int]


def canonical_key(piles: Sequence[int], player: int) -> CanonicalKey:
    """
    Compute the canonical key for a position.

    Args:
        piles: Pile sizes in any order (not modified)
        player: Player to move

    Returns:
        (sorted pile sizes, player)
    """
    return tuple(sorted(piles)), player

