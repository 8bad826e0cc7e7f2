"""scrypt key derivation.

The primitive itself is ``cryptography``'s :class:`Scrypt`.  This module
only enforces the memory ceiling carried by :class:`KdfParameters` before the
primitive allocates anything.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .exceptions import KdfResourceExceededError
from .models import KdfParameters


def required_memory(params: KdfParameters) -> int:
    """scrypt の作業領域のバイト数を返す（V 配列 + B バッファ）。"""
    return 128 * params.r * (params.n + params.p + 2)


def derive_key(password: bytes, salt: bytes, length: int, params: KdfParameters) -> bytes:
    """Derive *length* bytes from *password* and *salt*.

    Raises
    ------
    KdfResourceExceededError
        If the working set implied by ``N``, ``r`` and ``p`` exceeds
        ``params.maxmem``, or the primitive itself runs out of memory or
        cannot represent the parameters.
    ValueError
        If *length* is not positive or the primitive rejects the parameters.
    """
    if length < 1:
        raise ValueError(f"Derived key length must be positive, got {length}")
    required = required_memory(params)
    if required > params.maxmem:
        raise KdfResourceExceededError(required=required, ceiling=params.maxmem)
    try:
        kdf = Scrypt(salt=salt, length=length, n=params.n, r=params.r, p=params.p)
        return kdf.derive(password)
    except (MemoryError, OverflowError) as e:
        raise KdfResourceExceededError(
            required=required,
            ceiling=params.maxmem,
            message=f"scrypt primitive rejected the parameters: {e}",
            cause=e,
        ) from e
