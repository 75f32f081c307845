"""
Config - конфигурация i18n.

Поля (все опциональны при передаче в initialize()):
    default_lang     Язык по умолчанию
    current_lang     Текущий язык
    supported_langs  Список поддерживаемых языков (порядок сохраняется)
    use_url_lang     Брать ли язык из префикса URL (/fr/...)
    locales_path     Путь к директории (или URL) со словарями

Частичная конфигурация принимает как snake_case, так и исходные
camelCase-имена (defaultLang, supportedLangs, ...).

Использование:
    config = I18nConfig().merge({"supportedLangs": ["en", "fr"]})
    config = I18nConfig.from_yaml("config/i18n.yaml")
"""

import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

FALLBACK_LANG = "en"

# Исходные имена полей конфигурации -> имена атрибутов
CAMEL_CASE_FIELDS: Dict[str, str] = {
    "defaultLang": "default_lang",
    "currentLang": "current_lang",
    "supportedLangs": "supported_langs",
    "useUrlLang": "use_url_lang",
    "localesPath": "locales_path",
}


@dataclass
class I18nConfig:
    """Конфигурация i18n-контекста."""
    default_lang: Optional[str] = FALLBACK_LANG
    current_lang: Optional[str] = FALLBACK_LANG
    supported_langs: Optional[List[str]] = field(default_factory=lambda: [FALLBACK_LANG])
    use_url_lang: bool = True
    locales_path: str = "src/locales"

    def merge(self, partial: Optional[Mapping[str, Any]] = None,
              **overrides: Any) -> "I18nConfig":
        """
        Возвращает новую конфигурацию с перезаписанными полями.

        Поверхностное слияние: поля, которых нет в partial/overrides,
        сохраняют текущее значение.

        Raises:
            ConfigError: неизвестное поле или неверный тип значения
        """
        values = normalize_partial(partial, overrides)
        return replace(self, **values)

    @property
    def effective_lang(self) -> str:
        """Язык, используемый при отсутствии явного lang."""
        return self.current_lang or self.default_lang or FALLBACK_LANG

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "I18nConfig":
        """Конфигурация по умолчанию, дополненная значениями из YAML-файла."""
        return cls().merge(load_yaml_config(path))


def normalize_partial(partial: Optional[Mapping[str, Any]],
                      overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Приводит частичную конфигурацию к именам атрибутов I18nConfig."""
    known = {f.name for f in fields(I18nConfig)}
    values: Dict[str, Any] = {}

    for source in (partial or {}, overrides or {}):
        if not isinstance(source, Mapping):
            raise ConfigError(f"Конфигурация должна быть mapping, получено: {type(source).__name__}")
        for key, value in source.items():
            name = CAMEL_CASE_FIELDS.get(key, key)
            if name not in known:
                raise ConfigError(f"Неизвестное поле конфигурации: {key!r}")
            values[name] = value

    if "supported_langs" in values:
        values["supported_langs"] = _normalize_langs(values["supported_langs"])
    if "use_url_lang" in values and values["use_url_lang"] is None:
        del values["use_url_lang"]
    if "use_url_lang" in values and not isinstance(values["use_url_lang"], bool):
        raise ConfigError(f"use_url_lang должен быть bool: {values['use_url_lang']!r}")
    if "locales_path" in values and values["locales_path"] is not None:
        values["locales_path"] = str(values["locales_path"])

    return values


def _normalize_langs(langs: Any) -> Optional[List[str]]:
    """Список языков без дубликатов, порядок сохраняется."""
    if langs is None:
        return None
    if isinstance(langs, str):
        langs = [part.strip() for part in langs.split(",")]
    if not isinstance(langs, (list, tuple)):
        raise ConfigError(f"supported_langs должен быть списком: {langs!r}")
    for lang in langs:
        if not isinstance(lang, str):
            raise ConfigError(f"Код языка должен быть строкой: {lang!r}")
    return list(dict.fromkeys(lang for lang in langs if lang))


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Читает частичную конфигурацию из YAML.

    Поддерживает как плоский файл, так и секцию `i18n:` верхнего уровня.
    Отсутствующий файл - пустая конфигурация.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("Конфиг %s не найден, используются значения по умолчанию", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Ошибка разбора YAML {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: ожидался mapping верхнего уровня")
    if isinstance(data.get("i18n"), dict):
        data = data["i18n"]

    logger.info("Конфигурация i18n загружена из %s", config_path)
    return data
