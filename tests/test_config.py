"""ハッシャー設定のユニットテスト"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from k1s0_password_hash.config import HasherConfig, load_config
from k1s0_password_hash.exceptions import PasswordHashError, PasswordHashErrorCodes
from k1s0_password_hash.models import KdfParameters


def test_default_config() -> None:
    """デフォルト値が N=32768, r=8, p=1, 64MiB であること。"""
    config = HasherConfig()
    assert config.salt_length == 32
    assert config.key_length == 64
    assert config.parameters() == KdfParameters(n=32768, r=8, p=1, maxmem=64 * 1024 * 1024)


def test_n_must_be_power_of_two() -> None:
    with pytest.raises(ValidationError):
        HasherConfig(n=1000)


@pytest.mark.parametrize(
    "field, value",
    [("n", 1), ("r", 0), ("p", 0), ("maxmem", 0), ("salt_length", 8), ("key_length", 0)],
)
def test_out_of_range_values_rejected(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        HasherConfig(**{field: value})


def test_config_is_immutable() -> None:
    config = HasherConfig()
    with pytest.raises(ValidationError):
        config.n = 2048  # type: ignore[misc]


def test_load_config_section(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "app:\n  name: auth-server\npassword_hash:\n  n: 16384\n  key_length: 32\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.n == 16384
    assert config.key_length == 32
    assert config.r == 8


def test_load_config_custom_section(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("hashing:\n  p: 2\n", encoding="utf-8")
    assert load_config(path, section="hashing").p == 2


def test_load_config_missing_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("app:\n  name: auth-server\n", encoding="utf-8")
    assert load_config(path) == HasherConfig()


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == HasherConfig()


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(PasswordHashError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == PasswordHashErrorCodes.CONFIG_READ


def test_load_config_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("password_hash: [unclosed\n", encoding="utf-8")
    with pytest.raises(PasswordHashError) as exc_info:
        load_config(path)
    assert exc_info.value.code == PasswordHashErrorCodes.CONFIG_PARSE


def test_load_config_non_mapping_root_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(PasswordHashError) as exc_info:
        load_config(path)
    assert exc_info.value.code == PasswordHashErrorCodes.CONFIG_PARSE


def test_load_config_validation_error(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("password_hash:\n  n: 1000\n", encoding="utf-8")
    with pytest.raises(PasswordHashError) as exc_info:
        load_config(path)
    assert exc_info.value.code == PasswordHashErrorCodes.CONFIG_VALIDATION
    assert str(exc_info.value).startswith("CONFIG_VALIDATION_ERROR: ")
    assert isinstance(exc_info.value.__cause__, ValidationError)
