"""
Loaders - загрузка словаря одного языка из источника.

Интерфейс: load_dictionary(path, lang) -> Dict[key, value]

Реализации:
- FileSystemLoader       {path}/{lang}.json на диске
- PackageResourceLoader  {lang}.json из данных установленного пакета
- HttpLoader             GET {path}/{lang}.json через httpx

Любая ошибка (нет ресурса, битый JSON, не объект) - LoaderError.
Решение, что делать с ошибкой, принимает LocaleStore.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from .exceptions import LoaderError

logger = logging.getLogger(__name__)

Dictionary = Dict[str, Any]


def parse_dictionary(raw: Union[str, bytes], lang: str, source: str) -> Dictionary:
    """Разбирает JSON-словарь; верхний уровень обязан быть объектом."""
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LoaderError(lang, source, f"некорректный JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise LoaderError(lang, source, f"ожидался JSON-объект, получено: {type(data).__name__}")
    return data


class DictionaryLoader:
    """Базовый загрузчик словарей."""

    def load_dictionary(self, path: str, lang: str) -> Dictionary:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FileSystemLoader(DictionaryLoader):
    """Читает {path}/{lang}.json с диска."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load_dictionary(self, path: str, lang: str) -> Dictionary:
        file_path = Path(path) / f"{lang}.json"
        try:
            raw = file_path.read_text(encoding=self.encoding)
        except OSError as exc:
            raise LoaderError(lang, str(file_path), f"файл недоступен: {exc}") from exc
        logger.debug("Прочитан словарь %s (%d байт)", file_path, len(raw))
        return parse_dictionary(raw, lang, str(file_path))


class PackageResourceLoader(DictionaryLoader):
    """
    Читает словари, поставляемые внутри Python-пакета.

    path: "package" или "package/sub/dir" - пакет и путь внутри него.
    """

    def load_dictionary(self, path: str, lang: str) -> Dictionary:
        package, _, subdir = path.strip("/").partition("/")
        source = f"{package}:{subdir}/{lang}.json" if subdir else f"{package}:{lang}.json"
        try:
            resource = resources.files(package)
            for part in filter(None, subdir.split("/")):
                resource = resource.joinpath(part)
            raw = resource.joinpath(f"{lang}.json").read_bytes()
        except (ModuleNotFoundError, TypeError, OSError) as exc:
            raise LoaderError(lang, source, f"ресурс недоступен: {exc}") from exc
        return parse_dictionary(raw, lang, source)


class HttpLoader(DictionaryLoader):
    """Загружает {path}/{lang}.json по HTTP(S)."""

    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self._client = client
        self.timeout = timeout

    def load_dictionary(self, path: str, lang: str) -> Dictionary:
        url = f"{path.rstrip('/')}/{lang}.json"
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self.timeout)
            else:
                response = httpx.get(url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise LoaderError(lang, url, f"HTTP-ошибка: {exc}") from exc
        return parse_dictionary(response.content, lang, url)


def loader_for_path(path: str) -> DictionaryLoader:
    """Подбирает загрузчик по виду locales_path (URL или путь на диске)."""
    if path.startswith(("http://", "https://")):
        return HttpLoader()
    return FileSystemLoader()
