"""Deterministic random sources for value generation.

Every generation request owns exactly one :class:`Randomizer`.  It is built
from a single integer seed and never shared, so two randomizers created from
the same seed yield the same draw sequence regardless of what other requests
run concurrently.  :class:`random.Random` is used underneath; its Mersenne
Twister stream for an integer seed is identical across platforms and Python
releases.

When a caller does not supply a seed, :func:`entropy_seed` draws one from the
operating system's entropy pool via :mod:`secrets`.  The wall clock is never
used, so rapid successive calls do not collide.  Callers that need
reproducibility must always pass an explicit seed, or derive one from a stable
record key with :func:`derive_seed`.

Security notes
--------------
:func:`derive_seed` keys its hash with the configured secret using
HMAC-SHA256 and strict domain separation.  Without a secret it falls back to
an unkeyed SHA256, which is predictable and suitable only for non-sensitive
data.  Secrets and derived digests are never logged.
"""

from __future__ import annotations

import hashlib
import hmac
import random
import re
import secrets
import unicodedata
from collections.abc import Sequence
from typing import Final, TypeVar

from surrogate.utils.constants import INT64_MAX, INT64_MIN
from surrogate.utils.errors import InvalidParameterError

T = TypeVar("T")

_NS_SEED: Final = b"surrogate/v1/seed"
_UINT64_MASK: Final = (1 << 64) - 1


class Randomizer:
    """Seeded pseudo-random source scoped to a single generation request."""

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: int) -> None:
        self._seed = check_seed(seed)
        # Two's complement view so that negative seeds get their own stream.
        self._rng = random.Random(self._seed & _UINT64_MASK)

    @property
    def seed(self) -> int:
        return self._seed

    def intn(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""

        if n <= 0:
            raise InvalidParameterError(f"intn requires n > 0, got {n}")
        return self._rng.randrange(n)

    def randint(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi]``."""

        return self._rng.randint(lo, hi)

    def getrandbits(self, k: int) -> int:
        return self._rng.getrandbits(k)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.intn(len(seq))]

    def string(self, charset: str, length: int) -> str:
        """Return ``length`` characters drawn uniformly from ``charset``."""

        if length <= 0:
            return ""
        if not charset:
            raise InvalidParameterError("charset must not be empty")
        return "".join(charset[self._rng.randrange(len(charset))] for _ in range(length))

    def __repr__(self) -> str:
        return f"Randomizer(seed={self._seed})"


def check_seed(seed: int) -> int:
    """Return ``seed`` if it fits a signed 64-bit integer."""

    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidParameterError(f"seed must be an integer, got {type(seed).__name__}")
    if not INT64_MIN <= seed <= INT64_MAX:
        raise InvalidParameterError(f"seed out of int64 range: {seed}")
    return seed


def entropy_seed() -> int:
    """Return a non-negative int64 seed drawn from the OS entropy pool."""

    return secrets.randbits(63)


def new_randomizer(seed: int | None = None) -> Randomizer:
    """Return a :class:`Randomizer` for ``seed`` or a fresh entropy seed."""

    return Randomizer(entropy_seed() if seed is None else seed)


# ---------------------------------------------------------------------------
# Seeds derived from record keys
# ---------------------------------------------------------------------------


def canonicalize_key(key: str) -> str:
    """Normalize a record key for hashing.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - lowercase
    - NFC normalize (not NFKC)
    """

    normalized = unicodedata.normalize("NFC", key.strip())
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.lower()


def derive_seed(kind: str, key: str, *, secret: bytes = b"") -> int:
    """Derive a stable non-negative int64 seed for ``key`` of ``kind``.

    The seed is the first 63 bits of ``HMAC(secret, _NS_SEED || kind || 0x00
    || canonicalized_key)``; SHA256 over the same bytes is used when
    ``secret`` is empty.
    """

    data = _NS_SEED + kind.encode("utf-8") + b"\x00" + canonicalize_key(key).encode("utf-8")
    if secret:
        digest = hmac.new(secret, data, hashlib.sha256).digest()
    else:
        digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest[:8], "big") >> 1


__all__ = [
    "Randomizer",
    "canonicalize_key",
    "check_seed",
    "derive_seed",
    "entropy_seed",
    "new_randomizer",
]
