"""Password hashing with scrypt.

Produces PHC-like verifier strings::

    $scrypt$N=32768,r=8,p=1,maxmem=67108864$<salt_base64>$<hash_base64>

Hashing and verification are blocking and CPU/memory heavy.  The ``*_async``
variants run them on the event loop's default executor.
"""

from __future__ import annotations

import asyncio
import hmac
import logging

from .config import HasherConfig
from .encoding import decode, encode
from .kdf import derive_key
from .models import ALGORITHM, VerifierRecord
from .salt import RandomSource, generate_salt

logger = logging.getLogger(__name__)


class ScryptPasswordHasher:
    """scrypt によるパスワードハッシュ生成と検証。

    インスタンスは不変の設定のみを保持するため、複数スレッドから同時に
    使用してよい。
    """

    def __init__(
        self,
        config: HasherConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._config = config or HasherConfig()
        self._random_source = random_source

    @property
    def config(self) -> HasherConfig:
        return self._config

    def hash(self, password: str) -> str:
        """Hash *password* with a fresh random salt.

        Raises
        ------
        EntropyUnavailableError
            If no salt could be generated.
        KdfResourceExceededError
            If the configured parameters exceed the memory ceiling.
        """
        params = self._config.parameters()
        salt = generate_salt(self._config.salt_length, self._random_source)
        key = derive_key(password.encode("utf-8"), salt, self._config.key_length, params)
        encoded = encode(VerifierRecord(algorithm=ALGORITHM, params=params, salt=salt, hash=key))
        logger.debug(
            "Password hashed",
            extra={"n": params.n, "r": params.r, "p": params.p},
        )
        return encoded

    def verify(self, password: str, verifier: str) -> bool:
        """Check *password* against an encoded *verifier*.

        Returns ``False`` only when the password does not match.  A verifier
        that cannot be parsed or names another algorithm raises instead.

        Raises
        ------
        MalformedVerifierError
        UnsupportedAlgorithmError
        KdfResourceExceededError
        """
        record = decode(verifier)
        # 保存済みの鍵と同じ長さで再導出するため、比較は常に同じ長さのバッファで行われる
        derived = derive_key(password.encode("utf-8"), record.salt, len(record.hash), record.params)
        return hmac.compare_digest(derived, record.hash)

    def needs_rehash(self, verifier: str) -> bool:
        """ベリファイアが現在の設定と異なるパラメータで作られていれば True を返す。"""
        record = decode(verifier)
        outdated = (
            record.params != self._config.parameters()
            or len(record.salt) != self._config.salt_length
            or len(record.hash) != self._config.key_length
        )
        if outdated:
            logger.debug(
                "Verifier parameters are outdated",
                extra={
                    "n": record.params.n,
                    "r": record.params.r,
                    "p": record.params.p,
                    "key_length": len(record.hash),
                },
            )
        return outdated

    async def hash_async(self, password: str) -> str:
        """:meth:`hash` をデフォルトエグゼキューターで実行する。"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.hash, password)

    async def verify_async(self, password: str, verifier: str) -> bool:
        """:meth:`verify` をデフォルトエグゼキューターで実行する。"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.verify, password, verifier)


_hasher = ScryptPasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with scrypt and a random 32-byte salt."""
    return _hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a scrypt verifier string."""
    return _hasher.verify(password, hashed)


async def hash_password_async(password: str) -> str:
    return await _hasher.hash_async(password)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await _hasher.verify_async(password, hashed)
