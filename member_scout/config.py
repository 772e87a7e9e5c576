# === FILE: member_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации скрапера MemberScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

CSV_STDOUT = "stdout"


class SelectorConfig(BaseModel):
    """Структурные признаки страниц каталога (тег + точное значение class)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    pagination_tag: str = "ul"
    pagination_class: str = "pager lfr-pagination-buttons"
    detail_link_class: str = "lm"
    card_tag: str = "div"
    card_class: str = "socios-panel-lat"
    name_tag: str = "h2"
    name_class: str = "tit-soc"
    description_tag: str = "div"
    description_class: str = "socios-descripcion"


class FieldLabels(BaseModel):
    """Метки полей на языке сайта; они же служат заголовками CSV."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field("Nombre", min_length=1)
    address: str = Field("Domicilio", min_length=1)
    phone: str = Field("Teléfono", min_length=1)
    email: str = Field("Correo electrónico", min_length=1)
    contact_person: str = Field("Persona de contacto", min_length=1)

    def csv_header(self) -> List[str]:
        return [self.name, self.address, self.phone, self.email, self.contact_person]


class ScraperConfig(BaseModel):
    """Конфигурация для одного запуска обхода каталога."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., min_length=1, description="Начальный URL обхода.")
    csv: str = Field(CSV_STDOUT, min_length=1, description="Путь к CSV-файлу или 'stdout'.")
    max_records: int = Field(0, ge=0, description="Лимит записей, 0 - без ограничений.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на одну попытку запроса (секунд).")
    retries_on_timeout: int = Field(3, ge=1, description="Число попыток при таймауте.")
    user_agent: str = Field("Mozilla 5.0", min_length=1, description="Заголовок User-Agent.")
    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    labels: FieldLabels = Field(default_factory=FieldLabels)

    @field_validator("seed_url")
    def _check_scheme(cls, v: str) -> str:
        # URL сравниваются как строки, поэтому значение не нормализуется
        if not v.startswith(("http://", "https://")):
            raise ValueError("seed_url должен начинаться с http:// или https://")
        return v


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


def load_config(
    path: Union[str, Path, None] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> ScraperConfig:
    """
    Читает YAML или JSON (если задан path), накладывает overrides
    (значения None пропускаются) и возвращает проверенный ScraperConfig.
    """
    data: Dict[str, Any] = {}
    if path is not None:
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

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return ScraperConfig(**data)


__all__ = [
    "CSV_STDOUT",
    "FieldLabels",
    "ScraperConfig",
    "SelectorConfig",
    "load_config",
]
