"""
Pydantic-конфиг демонстрации жизненного цикла ресурсов.
"""

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resource_lifecycle.errors import ConfigError

DEFAULT_CONFIG_PATH = "config/default.yaml"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _upper(value):
    # уровни в YAML допускаются в любом регистре
    return value.upper() if isinstance(value, str) else value


# ---------- логирование ----------
class FileLogConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str
    max_bytes: int = 1_048_576
    backup_count: int = 3
    level: LogLevel = "DEBUG"
    fmt: str = Field(DEFAULT_FORMAT, alias="format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        return _upper(value)


class ConsoleLogConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    level: LogLevel = "INFO"
    fmt: str = Field("%(message)s", alias="format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value):
        return _upper(value)


class LoggingConfig(BaseModel):
    console: ConsoleLogConfig = Field(default_factory=ConsoleLogConfig)
    file: Optional[FileLogConfig] = None
    date_format: str = "%Y-%m-%d %H:%M:%S"


# ---------- identity-хеш ----------
class IdentityConfig(BaseModel):
    algorithm: Literal["fnv1a", "blake2b"] = "fnv1a"


# ---------- сценарии ----------
class ScenarioConfig(BaseModel):
    name: str
    size: int = Field(1000, ge=0)


class DemoConfig(BaseModel):
    construction: ScenarioConfig = Field(default_factory=lambda: ScenarioConfig(name="texture1"))
    move: ScenarioConfig = Field(default_factory=lambda: ScenarioConfig(name="texture2"))


# ---------- вывод ----------
class OutputConfig(BaseModel):
    path: Optional[str] = None
    plot: bool = False


class Settings(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    identity: IdentityConfig = Field(default_factory=IdentityConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    # загрузка из YAML
    @classmethod
    def load(cls, path: Optional[str] = None) -> "Settings":
        """
        Порядок поиска: явный path, затем $CONFIG_PATH, затем config/default.yaml.
        Явно указанный, но отсутствующий файл — ошибка; отсутствие файла
        по умолчанию означает встроенные значения.
        """
        yaml_path = path or os.getenv("CONFIG_PATH")
        if yaml_path is None:
            if not os.path.exists(DEFAULT_CONFIG_PATH):
                return cls()
            yaml_path = DEFAULT_CONFIG_PATH

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read config {yaml_path}: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"invalid config {yaml_path}: {exc}") from exc
