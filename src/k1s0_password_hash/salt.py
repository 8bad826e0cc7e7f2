"""Salt generation from a cryptographically secure random source."""

from __future__ import annotations

import os
from typing import Callable

from .exceptions import EntropyUnavailableError
from .models import DEFAULT_SALT_LENGTH

RandomSource = Callable[[int], bytes]


def generate_salt(
    size: int = DEFAULT_SALT_LENGTH,
    random_source: RandomSource | None = None,
) -> bytes:
    """Return *size* fresh random bytes.

    Parameters
    ----------
    size:
        Number of bytes to return.
    random_source:
        ``getRandomBytes(n)`` style callable; defaults to :func:`os.urandom`.

    Raises
    ------
    EntropyUnavailableError
        If the source fails or returns a short read.  There is no fallback
        to a weaker generator.
    """
    source = random_source or os.urandom
    try:
        salt = source(size)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailableError(f"Secure random source failed: {e}", cause=e) from e
    if len(salt) != size:
        raise EntropyUnavailableError(
            f"Secure random source returned {len(salt)} bytes, expected {size}"
        )
    return bytes(salt)
