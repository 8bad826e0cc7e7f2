"""password_hash ライブラリの例外型定義"""

from __future__ import annotations


class PasswordHashError(Exception):
    """password_hash ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PasswordHashErrorCodes:
    """PasswordHashError のエラーコード定数。"""

    ENTROPY_UNAVAILABLE: str = "ENTROPY_UNAVAILABLE"
    KDF_RESOURCE_EXCEEDED: str = "KDF_RESOURCE_EXCEEDED"
    MALFORMED_VERIFIER: str = "MALFORMED_VERIFIER"
    UNSUPPORTED_ALGORITHM: str = "UNSUPPORTED_ALGORITHM"
    CONFIG_READ: str = "CONFIG_READ_ERROR"
    CONFIG_PARSE: str = "CONFIG_PARSE_ERROR"
    CONFIG_VALIDATION: str = "CONFIG_VALIDATION_ERROR"


class EntropyUnavailableError(PasswordHashError):
    """安全な乱数源からソルトを取得できなかった。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(PasswordHashErrorCodes.ENTROPY_UNAVAILABLE, message, cause)


class KdfResourceExceededError(PasswordHashError):
    """KDF パラメータが必要とするメモリ量が上限を超えている。"""

    def __init__(
        self,
        required: int,
        ceiling: int,
        message: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.required = required
        self.ceiling = ceiling
        super().__init__(
            PasswordHashErrorCodes.KDF_RESOURCE_EXCEEDED,
            message or f"scrypt parameters require {required} bytes, ceiling is {ceiling} bytes",
            cause,
        )


class MalformedVerifierError(PasswordHashError):
    """ベリファイア文字列が書式に従っていない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(PasswordHashErrorCodes.MALFORMED_VERIFIER, message, cause)


class UnsupportedAlgorithmError(PasswordHashError):
    """ベリファイア文字列が scrypt 以外のアルゴリズムを示している。"""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            PasswordHashErrorCodes.UNSUPPORTED_ALGORITHM,
            f"Unsupported algorithm: {algorithm!r} (only scrypt is supported)",
        )
