"""パスワードハッシュ関連データモデル"""

from __future__ import annotations

from dataclasses import dataclass

ALGORITHM = "scrypt"

DEFAULT_N = 32768
DEFAULT_R = 8
DEFAULT_P = 1
DEFAULT_MAXMEM = 64 * 1024 * 1024  # 64MiB
DEFAULT_SALT_LENGTH = 32
DEFAULT_KEY_LENGTH = 64


@dataclass(frozen=True)
class KdfParameters:
    """scrypt のパラメータ。

    エンコード時の名前と順序は ``N, r, p, maxmem`` で固定。
    """

    n: int = DEFAULT_N
    r: int = DEFAULT_R
    p: int = DEFAULT_P
    maxmem: int = DEFAULT_MAXMEM

    def items(self) -> list[tuple[str, int]]:
        """エンコード順の (名前, 値) のリストを返す。"""
        return [("N", self.n), ("r", self.r), ("p", self.p), ("maxmem", self.maxmem)]


@dataclass(frozen=True)
class VerifierRecord:
    """パース済みのベリファイア文字列。"""

    algorithm: str
    params: KdfParameters
    salt: bytes
    hash: bytes
