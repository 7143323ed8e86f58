"""结构化日志配置模块。

使用 structlog 提供结构化日志支持，支持 JSON 和控制台两种输出格式。
"""

import logging
import sys
from collections.abc import Sequence
from typing import Any

import structlog
from structlog.types import Processor

from trade_intent.config import LogFormat, get_settings


def setup_logging() -> None:
    """配置结构化日志系统。

    根据配置设置日志级别和输出格式。
    """
    settings = get_settings()

    # 设置标准库日志级别
    log_level = getattr(logging, settings.log_level)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    # 共享处理器
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # 根据格式选择渲染器
    if settings.log_format == LogFormat.JSON:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器。

    Args:
        name: 日志记录器名称。如果为 None，则使用调用模块名。

    Returns:
        结构化日志记录器实例。
    """
    return structlog.get_logger(name)


# 便捷日志函数
def log_provider_call(
    logger: structlog.stdlib.BoundLogger,
    *,
    provider: str,
    success: bool,
    latency_ms: float,
    **kwargs: Any,
) -> None:
    """记录 NLP 服务调用。"""
    level = "info" if success else "warning"
    getattr(logger, level)(
        "provider_call",
        provider=provider,
        success=success,
        latency_ms=round(latency_ms, 2),
        **kwargs,
    )


def log_command_parsed(
    logger: structlog.stdlib.BoundLogger,
    *,
    intent: str,
    valid: bool,
    missing: Sequence[str] = (),
    errors: Sequence[str] = (),
    **kwargs: Any,
) -> None:
    """记录解析后的交易指令。"""
    logger.info(
        "command_parsed",
        intent=intent,
        valid=valid,
        missing=list(missing),
        errors=list(errors),
        **kwargs,
    )
