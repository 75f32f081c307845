"""
webi18n - минимальная интернационализация для веб-фронтенда.

Модули:
- config: конфигурация (dataclass, YAML)
- loaders: загрузка словарей (диск, данные пакета, HTTP)
- store: словари языков в памяти
- plurals: CLDR-категории множественного числа
- url: язык из префикса пути URL
- translator: резолв ключа в строку
- core: контекст I18n (инициализация + t)
- checker, cli: проверка полноты переводов в исходниках
"""

from .config import I18nConfig
from .core import I18n
from .exceptions import CheckerError, ConfigError, I18nError, LoaderError
from .loaders import (DictionaryLoader, FileSystemLoader, HttpLoader,
                      PackageResourceLoader)
from .store import LocaleStore
from .translator import BoundTranslation, Translator
from .url import detect_lang_from_url

__version__ = "0.1.3"

__all__ = [
    "BoundTranslation",
    "CheckerError",
    "ConfigError",
    "DictionaryLoader",
    "FileSystemLoader",
    "HttpLoader",
    "I18n",
    "I18nConfig",
    "I18nError",
    "LoaderError",
    "LocaleStore",
    "PackageResourceLoader",
    "Translator",
    "detect_lang_from_url",
]
