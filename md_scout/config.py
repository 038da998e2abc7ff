# === FILE: md_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации MdScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple, Union
from urllib.parse import urlsplit

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from md_scout.constants import (
    CONTAINER_SELECTORS,
    CONVERTER_URL,
    DEFAULT_PAGE_URL,
    DEFAULT_USER_AGENT,
    ICON_SRC,
    MARKDOWN_CONTENT_TYPES,
    SNIPPET_SELECTORS,
)


class ScoutConfig(BaseModel):
    """Настройки одного запуска аннотирования страницы результатов."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    page_url: str = Field(DEFAULT_PAGE_URL, description="URL страницы выдачи (origin для относительных ссылок).")
    converter_url: str = Field(CONVERTER_URL, description="Базовый URL сервиса-конвертера.")
    icon_src: str = Field(ICON_SRC, min_length=1, description="Источник иконки для кнопки.")
    container_selectors: Tuple[str, ...] = Field(
        CONTAINER_SELECTORS, min_length=1, description="CSS-селекторы блоков результатов."
    )
    snippet_selectors: Tuple[str, ...] = Field(
        SNIPPET_SELECTORS, min_length=1, description="CSS-селекторы сниппета, по приоритету."
    )
    accepted_content_types: Tuple[str, ...] = Field(
        MARKDOWN_CONTENT_TYPES, min_length=1, description="Допустимые Content-Type для HEAD-проверки."
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    probe_timeout: Optional[float] = Field(None, gt=0, description="Таймаут HEAD-запроса (секунд), None — без ограничения.")

    @field_validator("page_url", "converter_url")
    def _require_absolute_http(cls, v: str) -> str:
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"ожидается абсолютный http(s) URL, получено {v!r}")
        return v

    @field_validator("accepted_content_types")
    def _lower_content_types(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(ct.strip().lower() for ct in v if ct.strip())


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


def load_config(path: Union[str, Path, None]) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.

    Без явного пути используется configs/default.yaml, а если его нет —
    встроенные значения по умолчанию. Явно указанный, но отсутствующий файл
    приводит к FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScoutConfig()
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

    return ScoutConfig(**data)


__all__ = ["ScoutConfig", "load_config", "ValidationError"]
