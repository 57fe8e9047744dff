"""Random sources backing maze generation."""

from __future__ import annotations

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a reproducible generator for ``seed`` or an OS-entropy one.

    Unseeded grids get ``random.SystemRandom`` so two of them never share a
    stream.
    """

    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)
