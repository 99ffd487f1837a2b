"""运行时配置模块。

支持从 .env、buidler-settings.yaml 以及环境变量（前缀 BUIDLER_）加载配置。
这里只包含运行时本身的设置（日志、超时等），
项目配置（网络、路径、编译器版本）由 resolution 模块负责。
"""

import os
import warnings
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_settings_from_yaml() -> Dict[str, Any]:
    """从 buidler-settings.yaml 加载配置（若存在）。"""
    candidates = []
    explicit = os.getenv("BUIDLER_SETTINGS_FILE")
    if explicit:
        candidates.append(Path(explicit).expanduser())
    candidates.extend([
        Path.cwd() / "buidler-settings.yaml",
        Path(__file__).resolve().parents[2] / "buidler-settings.yaml",
    ])

    seen: set[Path] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        try:
            if path.exists():
                data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                if isinstance(data, dict):
                    return data
                warnings.warn(f"Settings file {path} is not a mapping, ignored")
        except (OSError, yaml.YAMLError) as exc:
            warnings.warn(f"Failed to read settings file {path}: {exc}")
    return {}


class BuidlerSettings(BaseSettings):
    """运行时设置（使用 Pydantic）。"""

    # ---- 日志 ----
    log_dir: str = Field(default="logs", description="日志目录")
    log_level: str = Field(default="INFO", description="日志级别，例如 DEBUG/INFO")
    log_to_file: bool = Field(default=False, description="是否把 JSON 日志写入 log_dir")
    log_redact_content: bool = Field(default=False, description="是否截断日志内容")

    # ---- Provider ----
    http_timeout: float = Field(default=20.0, ge=1.0, description="JSON-RPC HTTP 超时时间（秒）")

    model_config = SettingsConfigDict(
        env_prefix="BUIDLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _yaml_source() -> Dict[str, Any]:
        return _load_settings_from_yaml()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._yaml_source,
            file_secret_settings,
        )


settings = BuidlerSettings()

Settings = BuidlerSettings
