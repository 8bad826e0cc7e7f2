"""Verifier string serialization.

Wire format::

    $scrypt$N=<n>,r=<r>,p=<p>,maxmem=<bytes>$<salt>$<hash>

where *salt* and *hash* are standard base64 with the ``=`` padding removed.
"""

from __future__ import annotations

import base64
import binascii
import re

from .exceptions import MalformedVerifierError, UnsupportedAlgorithmError
from .models import ALGORITHM, KdfParameters, VerifierRecord

_FIELD_COUNT = 5
# uint64 の最大値は 20 桁
_DECIMAL_RE = re.compile(r"[0-9]{1,20}")
_UINT64_MAX = 2**64 - 1
# OpenSSL の scrypt が受け付ける p * r の上限
_PR_MAX = 2**30 - 1
_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*")

# エンコード名 -> KdfParameters のフィールド名
_PARAM_FIELDS = {"N": "n", "r": "r", "p": "p", "maxmem": "maxmem"}
_REQUIRED_PARAMS = ("N", "r", "p")


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64decode(field: str, value: str) -> bytes:
    """パディングなしの標準 base64 を厳密にデコードする。"""
    if not _BASE64_RE.fullmatch(value) or len(value) % 4 == 1:
        raise MalformedVerifierError(f"Invalid base64 in {field} field")
    try:
        data = base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except binascii.Error as e:
        raise MalformedVerifierError(f"Invalid base64 in {field} field", cause=e) from e
    # 末尾の未使用ビットが 0 でない表現は受け付けない
    if _b64encode(data) != value:
        raise MalformedVerifierError(f"Non-canonical base64 in {field} field")
    return data


def _encode_params(params: KdfParameters) -> str:
    return ",".join(f"{name}={format(value, 'd')}" for name, value in params.items())


def _decode_params(value: str) -> KdfParameters:
    parsed: dict[str, int] = {}
    for entry in value.split(","):
        parts = entry.split("=")
        if len(parts) != 2:
            raise MalformedVerifierError(f"Parameter entry is not name=value: {entry!r}")
        name, raw = parts
        if not name:
            raise MalformedVerifierError(f"Parameter name is empty: {entry!r}")
        if not _DECIMAL_RE.fullmatch(raw):
            raise MalformedVerifierError(f"Parameter {name} is not a non-negative integer: {raw[:32]!r}")
        if name not in _PARAM_FIELDS:
            raise MalformedVerifierError(f"Unknown scrypt parameter: {name!r}")
        if name in parsed:
            raise MalformedVerifierError(f"Duplicate scrypt parameter: {name!r}")
        parsed[name] = int(raw)

    missing = [name for name in _REQUIRED_PARAMS if name not in parsed]
    if missing:
        raise MalformedVerifierError(f"Missing scrypt parameter(s): {', '.join(missing)}")

    params = KdfParameters(**{_PARAM_FIELDS[name]: v for name, v in parsed.items()})
    if params.n < 2 or params.n & (params.n - 1):
        raise MalformedVerifierError(f"N must be a power of 2 greater than 1, got {params.n}")
    if params.r < 1 or params.p < 1:
        raise MalformedVerifierError(f"r and p must be positive, got r={params.r}, p={params.p}")
    if max(params.n, params.r, params.p, params.maxmem) > _UINT64_MAX:
        raise MalformedVerifierError("scrypt parameters must fit in 64 bits")
    if params.p * params.r > _PR_MAX:
        raise MalformedVerifierError(f"p*r must not exceed 2^30-1, got p={params.p}, r={params.r}")
    # N < 2^(16*r)
    if params.n.bit_length() > 16 * params.r:
        raise MalformedVerifierError(f"N is too large for r={params.r}, got N={params.n}")
    return params


def encode(record: VerifierRecord) -> str:
    """VerifierRecord を正規形のベリファイア文字列に変換する。"""
    return "$".join(
        [
            "",
            record.algorithm,
            _encode_params(record.params),
            _b64encode(record.salt),
            _b64encode(record.hash),
        ]
    )


def decode(encoded: str) -> VerifierRecord:
    """ベリファイア文字列をパースして VerifierRecord を返す。

    Raises:
        MalformedVerifierError: 書式違反（フィールド数、パラメータ、base64）
        UnsupportedAlgorithmError: アルゴリズムが scrypt ではない
    """
    fields = encoded.split("$")
    if len(fields) != _FIELD_COUNT or fields[0]:
        raise MalformedVerifierError(
            f"Verifier must have the form $alg$params$salt$hash, got {len(fields)} field(s)"
        )
    _, algorithm, params_field, salt_field, hash_field = fields

    if algorithm != ALGORITHM:
        raise UnsupportedAlgorithmError(algorithm)

    params = _decode_params(params_field)
    salt = _b64decode("salt", salt_field)
    key = _b64decode("hash", hash_field)
    if not key:
        raise MalformedVerifierError("Hash field is empty")
    return VerifierRecord(algorithm=algorithm, params=params, salt=salt, hash=key)
