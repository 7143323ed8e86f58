"""配置加载模块 - 从环境变量和 .env 文件加载配置。"""

from enum import Enum
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """日志格式枚举。"""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """系统配置设置。

    从环境变量和 .env 文件加载配置。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Wit.ai API ====================
    wit_ai_token: str = Field(default="", description="Wit.ai Server Access Token")
    wit_ai_base_url: str = Field(
        default="https://api.wit.ai",
        description="Wit.ai API 地址",
    )
    wit_ai_api_version: str = Field(
        default="20240304",
        description="Wit.ai API 版本（v 参数）",
    )
    wit_ai_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Wit.ai 调用超时（秒）",
    )
    wit_ai_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="传输失败时的最大尝试次数",
    )
    wit_ai_retry_backoff: float = Field(
        default=1.0,
        ge=0.0,
        le=10.0,
        description="重试指数退避基数（秒）",
    )

    # ==================== 日志配置 ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="日志级别",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="日志输出格式",
    )

    @field_validator("wit_ai_base_url", mode="before")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        """去掉末尾的斜杠。"""
        return v.rstrip("/") if isinstance(v, str) else v

    def validate_for_provider(self) -> list[str]:
        """验证调用 Wit.ai 的必要配置，返回缺失项列表。"""
        missing = []
        if not self.wit_ai_token:
            missing.append("WIT_AI_TOKEN")
        return missing


# 全局配置实例（延迟初始化）
_settings: Settings | None = None


def get_settings() -> Settings:
    """获取全局配置实例。"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """重新加载配置。"""
    global _settings
    _settings = Settings()
    return _settings
