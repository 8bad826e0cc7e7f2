"""ハッシャー設定（pydantic BaseModel）と YAML 読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import PasswordHashError, PasswordHashErrorCodes
from .models import (
    DEFAULT_KEY_LENGTH,
    DEFAULT_MAXMEM,
    DEFAULT_N,
    DEFAULT_P,
    DEFAULT_R,
    DEFAULT_SALT_LENGTH,
    KdfParameters,
)


class HasherConfig(BaseModel):
    """新規ハッシュ生成時の scrypt 設定。"""

    model_config = ConfigDict(frozen=True)

    n: int = Field(default=DEFAULT_N, ge=2)
    r: int = Field(default=DEFAULT_R, ge=1)
    p: int = Field(default=DEFAULT_P, ge=1)
    maxmem: int = Field(default=DEFAULT_MAXMEM, ge=1)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=16)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=16)

    @field_validator("n")
    @classmethod
    def _n_power_of_two(cls, v: int) -> int:
        if v & (v - 1):
            raise ValueError(f"n must be a power of 2, got {v}")
        return v

    def parameters(self) -> KdfParameters:
        """新規ハッシュ用の KdfParameters を返す。"""
        return KdfParameters(n=self.n, r=self.r, p=self.p, maxmem=self.maxmem)


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PasswordHashError(
            code=PasswordHashErrorCodes.CONFIG_READ,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise PasswordHashError(
            code=PasswordHashErrorCodes.CONFIG_PARSE,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path, section: str = "password_hash") -> HasherConfig:
    """設定ファイルの指定セクションを読み込んで HasherConfig を返す。

    section が存在しない場合はデフォルト値を使う。
    """
    data = _read_yaml(path)
    if not isinstance(data, dict):
        raise PasswordHashError(
            code=PasswordHashErrorCodes.CONFIG_PARSE,
            message=f"Config root must be a mapping: {path}",
        )
    try:
        return HasherConfig.model_validate(data.get(section) or {})
    except ValidationError as e:
        raise PasswordHashError(
            code=PasswordHashErrorCodes.CONFIG_VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
