"""ホスト向けのログ設定

ライブラリ本体は ``logging.getLogger(__name__)`` に ``extra=`` 付きで出力する。
:func:`new_logger` はそのレコードと structlog のイベントを同じレンダラーに流し、
秘匿フィールドをマスクする。
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

LOGGER_NAME = "k1s0_password_hash"
REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset({"password", "salt", "hash", "derived_key", "verifier"})

_HANDLER_NAME = "k1s0_password_hash.structlog"


def redact_secrets(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """パスワードやハッシュ値がログに出力されないようマスクする。"""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def _install_handler(level: int, renderer: structlog.types.Processor, stream: IO[str]) -> None:
    """ライブラリロガーに ProcessorFormatter 付きハンドラーを付け替える。"""
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.ExtraAdder(),
            redact_secrets,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in lib_logger.handlers if h.get_name() == _HANDLER_NAME]:
        lib_logger.removeHandler(existing)
    lib_logger.addHandler(handler)
    lib_logger.setLevel(level)


def new_logger(
    level: str = "INFO",
    format: str = "json",
    stream: IO[str] | None = None,
) -> structlog.stdlib.BoundLogger:
    """ライブラリのログを structlog で出力するよう設定し、ロガーを返す。

    Args:
        level: ログレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
        stream: 出力先（省略時は stdout）

    Returns:
        ``k1s0_password_hash`` ロガーに紐づく structlog.stdlib.BoundLogger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    _install_handler(log_level, renderer, stream or sys.stdout)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            redact_secrets,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger(LOGGER_NAME)
