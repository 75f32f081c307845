"""
LocaleStore - словари переводов в памяти: язык -> плоский словарь.

Словарь каждого языка собирается целиком и только потом устанавливается
в хранилище (замена слота языка целиком). Ошибка загрузки одного языка
не прерывает загрузку остальных: язык получает пустой словарь,
а Translator для него возвращает сами ключи.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import LoaderError
from .loaders import Dictionary, DictionaryLoader, loader_for_path

logger = logging.getLogger(__name__)

# Верхняя граница параллельных загрузок
MAX_LOAD_WORKERS = 4


class LocaleStore:
    """Хранилище словарей по кодам языков."""

    def __init__(self, loader: Optional[DictionaryLoader] = None):
        self.loader = loader
        self._locales: Dict[str, Dictionary] = {}
        self._lock = threading.Lock()

    @classmethod
    def load(cls, locales_path: str, languages: Iterable[str],
             loader: Optional[DictionaryLoader] = None) -> "LocaleStore":
        """Создаёт хранилище и загружает в него все языки."""
        store = cls(loader)
        store.load_all(locales_path, languages)
        return store

    def load_all(self, locales_path: str, languages: Iterable[str]) -> Dict[str, bool]:
        """
        Загружает словари всех языков параллельно и ждёт завершения.

        Args:
            locales_path: Директория/URL/пакет со словарями
            languages: Коды языков (дубликаты игнорируются)

        Returns:
            Dict[lang, loaded_ok] - False для языков, получивших пустой словарь
        """
        langs: List[str] = list(dict.fromkeys(languages))
        if not langs:
            return {}

        loader = self.loader or loader_for_path(locales_path)
        status: Dict[str, bool] = {}

        def _load(lang: str) -> Tuple[str, Dictionary, bool]:
            try:
                return lang, dict(loader.load_dictionary(locales_path, lang)), True
            except LoaderError as exc:
                logger.error("Не удалось загрузить переводы для языка %s: %s", lang, exc.reason)
                return lang, {}, False
            except Exception:
                logger.exception("Сбой загрузчика %r для языка %s", loader, lang)
                return lang, {}, False

        max_workers = max(1, min(len(langs), MAX_LOAD_WORKERS))
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(_load, lang) for lang in langs]
            for future in as_completed(futures):
                lang, dictionary, ok = future.result()
                self.install(lang, dictionary)
                status[lang] = ok

        loaded = sum(1 for ok in status.values() if ok)
        logger.info("Загружено словарей: %d из %d (%s)", loaded, len(langs), ", ".join(langs))
        return {lang: status[lang] for lang in langs}

    def install(self, lang: str, dictionary: Dictionary) -> None:
        """Устанавливает словарь языка целиком, заменяя предыдущий."""
        with self._lock:
            self._locales[lang] = dictionary

    def get(self, lang: str) -> Dictionary:
        """Словарь языка (пустой, если язык не загружен)."""
        return self._locales.get(lang, {})

    def lookup(self, lang: str, key: str) -> Optional[Any]:
        return self._locales.get(lang, {}).get(key)

    def languages(self) -> List[str]:
        return list(self._locales)

    def as_dict(self) -> Dict[str, Dictionary]:
        with self._lock:
            return {lang: dict(d) for lang, d in self._locales.items()}

    def __contains__(self, lang: object) -> bool:
        return lang in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{lang}={len(d)}" for lang, d in self._locales.items())
        return f"LocaleStore({sizes})"
