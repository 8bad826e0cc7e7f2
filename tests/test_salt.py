"""ソルト生成のユニットテスト"""

from unittest.mock import MagicMock

import pytest
from k1s0_password_hash.exceptions import EntropyUnavailableError, PasswordHashErrorCodes
from k1s0_password_hash.salt import generate_salt


def test_generate_salt_default_length() -> None:
    """デフォルトで 32 バイトのソルトが生成されること。"""
    salt = generate_salt()
    assert isinstance(salt, bytes)
    assert len(salt) == 32


def test_generate_salt_custom_length() -> None:
    assert len(generate_salt(16)) == 16


def test_generate_salt_unique() -> None:
    """呼び出しごとに異なるソルトが生成されること。"""
    assert generate_salt() != generate_salt()


def test_generate_salt_uses_injected_source() -> None:
    source = MagicMock(return_value=b"\x01" * 32)
    salt = generate_salt(32, random_source=source)
    source.assert_called_once_with(32)
    assert salt == b"\x01" * 32


def test_generate_salt_source_failure_raises() -> None:
    """乱数源の失敗が EntropyUnavailableError として伝播すること。"""
    cause = OSError("getrandom failed")
    source = MagicMock(side_effect=cause)

    with pytest.raises(EntropyUnavailableError) as exc_info:
        generate_salt(random_source=source)

    assert exc_info.value.code == PasswordHashErrorCodes.ENTROPY_UNAVAILABLE
    assert exc_info.value.__cause__ is cause


def test_generate_salt_not_implemented_raises() -> None:
    source = MagicMock(side_effect=NotImplementedError("no urandom"))
    with pytest.raises(EntropyUnavailableError):
        generate_salt(random_source=source)


def test_generate_salt_short_read_raises() -> None:
    """要求より短いバイト列が返された場合にエラーになること。"""
    source = MagicMock(return_value=b"\x00" * 8)
    with pytest.raises(EntropyUnavailableError) as exc_info:
        generate_salt(32, random_source=source)
    assert "8 bytes" in str(exc_info.value)
