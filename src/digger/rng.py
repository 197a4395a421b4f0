from __future__ import annotations

import hashlib
import logging
import random
import re
import secrets
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

SeedLike = Union[int, str, None]

_INT_SEED = re.compile(r"-?[0-9]+")


def derive_seed(source: str) -> int:
    """Derive a 32-bit integer seed from an arbitrary string using SHA256."""
    digest = hashlib.sha256(source.encode("utf-8")).digest()
    val = int.from_bytes(digest[:8], "big", signed=False)
    return val & 0xFFFFFFFF


class RandomSource:
    """
    Sequential random source threaded through every generation step.

    - Uses a dedicated instance of random.Random; does not mutate global random state.
    - Accepts an int, a string or None. Digit-only strings are used as integers;
      any other string is hashed to a stable int.
    - With no seed a fresh one is drawn and logged, so any run can be replayed.
    """

    def __init__(self, seed: SeedLike = None) -> None:
        if seed is None:
            effective = secrets.randbits(32)
            logger.info("No seed provided; generated random seed: %d", effective)
        elif isinstance(seed, bool):
            raise TypeError("Unsupported seed type: %r" % (type(seed),))
        elif isinstance(seed, int):
            effective = seed & 0xFFFFFFFF
            logger.debug("Using seed: %d", effective)
        elif isinstance(seed, str):
            s = seed.strip()
            effective = int(s) & 0xFFFFFFFF if _INT_SEED.fullmatch(s) else derive_seed(s)
            logger.debug("Using seed %r -> %d", seed, effective)
        else:
            raise TypeError("Unsupported seed type: %r" % (type(seed),))
        self._seed = effective
        self._rng = random.Random(effective)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer in [a, b], both ends inclusive."""
        return self._rng.randint(a, b)

    def getstate(self) -> Any:
        return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        self._rng.setstate(state)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"


__all__ = ["RandomSource", "SeedLike", "derive_seed"]
