# === FILE: sitemap_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации SitemapScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

from sitemap_scout.crawler.fetcher import DEFAULT_USER_AGENTS
from sitemap_scout.locator import DEFAULT_SITEMAP_PATHS


class ScraperConfig(BaseModel):
    """Конфигурация для одного запуска: поиск sitemap и сбор SEO-данных."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field("https://example.com", description="Корневой URL сайта.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    batch_size: int = Field(10, ge=1, description="Число одновременных запросов в пакете.")
    user_agents: List[str] = Field(
        default_factory=lambda: list(DEFAULT_USER_AGENTS),
        min_length=1,
        description="Пул заголовков User-Agent, выбирается случайно на каждый запрос.",
    )
    sitemap_paths: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SITEMAP_PATHS),
        min_length=1,
        description="Относительные пути-кандидаты для поиска sitemap.",
    )
    output: Path = Field(Path("output.json"), description="Файл для JSON-результатов.")

    @field_validator("user_agents", "sitemap_paths")
    @classmethod
    def _no_blank_entries(cls, v: List[str]) -> List[str]:
        cleaned = [item.strip() for item in v]
        if any(not item for item in cleaned):
            raise ValueError("пустые строки не допускаются")
        return cleaned

    def with_overrides(self, **values: Any) -> ScraperConfig:
        """Возвращает новую проверенную копию, подставляя значения, отличные от None."""
        updates = {k: v for k, v in values.items() if v is not None}
        if not updates:
            return self
        data = self.model_dump()
        data["base_url"] = str(self.base_url)
        data.update(updates)
        return type(self).model_validate(data)


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


def load_config(path: Union[str, Path, None] = None) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.

    Без пути используется configs/default.yaml, а если его нет, значения по умолчанию.
    Явно указанный, но отсутствующий файл приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScraperConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ScraperConfig(**data)


__all__ = ["ScraperConfig", "load_config"]
