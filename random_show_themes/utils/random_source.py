"""Random number generator construction for reproducible draws."""

import hashlib
import random
from typing import Optional, Union

SeedLike = Union[int, str]

_SEED_MASK = (1 << 63) - 1


def derive_seed(seed: SeedLike) -> int:
    """
    Turn an int or string seed into a stable non-negative 63-bit integer.

    Strings are hashed with SHA-256 so the result does not depend on
    Python's per-process string hashing.
    """
    if isinstance(seed, int):
        return abs(seed) & _SEED_MASK
    digest = hashlib.sha256(str(seed).encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big") & _SEED_MASK


def get_random(seed: Optional[SeedLike] = None) -> random.Random:
    """Return an independent Random instance, seeded when a seed is given."""
    if seed is None:
        return random.Random()
    return random.Random(derive_seed(seed))
