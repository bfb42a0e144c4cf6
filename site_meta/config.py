# === FILE: site_meta/config.py ===
"""
Загрузка и валидация настроек краулера SiteMeta.
Схема описана через Pydantic, файлы читаются из YAML или JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CrawlerConfig(BaseModel):
    """Настройки одного запуска обхода sitemap."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sitemap_path: str = Field("/sitemap.xml", min_length=1, description="Путь к sitemap от базового URL.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteMetaBot/1.0", min_length=1, description="Заголовок User-Agent.")
    concurrency: int = Field(4, ge=1, le=64, description="Число одновременно загружаемых страниц.")
    retry_times: int = Field(2, ge=0, description="Число повторных попыток при 5xx и 429.")
    retry_backoff: float = Field(1.0, ge=0, description="Базовая пауза перед повтором (секунд).")
    output_dir: Path = Field(Path("."), description="Каталог для отчётов с автоматическим именем.")

    @field_validator("sitemap_path", mode="before")
    def _leading_slash(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.startswith("/"):
            return "/" + v
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def _read_file(path_obj: Path) -> dict[str, Any]:
    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный CrawlerConfig.

    Без пути берётся configs/default.yaml, если он есть, иначе значения по умолчанию.
    Явно указанный, но отсутствующий файл даёт FileNotFoundError.
    Ключи overrides со значением None игнорируются.
    """
    if path is None:
        data = _read_file(_DEFAULT_CFG) if _DEFAULT_CFG.is_file() else {}
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
        data = _read_file(path_obj)

    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)


def with_overrides(config: CrawlerConfig, **overrides: Any) -> CrawlerConfig:
    """Возвращает новый проверенный конфиг с заменёнными полями (None пропускаются)."""
    update = {k: v for k, v in overrides.items() if v is not None}
    if not update:
        return config
    return CrawlerConfig(**{**config.model_dump(), **update})
