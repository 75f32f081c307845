"""
Core - контекст i18n приложения.

I18n владеет конфигурацией, хранилищем словарей и транслятором.
Создаётся один раз при старте приложения и передаётся по ссылке;
глобального состояния нет.

Использование:
    i18n = I18n(path_provider=lambda: request.path)
    i18n.initialize({"supportedLangs": ["en", "fr"], "localesPath": "src/locales"})

    i18n.t("greeting")
    i18n.t("files", count=3)
    t = i18n.get_translation("fr").t
"""

import logging
from typing import Any, Callable, Mapping, Optional

from .config import FALLBACK_LANG, I18nConfig
from .loaders import DictionaryLoader
from .store import LocaleStore
from .translator import BoundTranslation, Translator
from .url import detect_lang_from_url

logger = logging.getLogger(__name__)

PathProvider = Callable[[], Optional[str]]


class I18n:
    """Конфигурация + словари + резолв ключей."""

    def __init__(self, config: Optional[I18nConfig] = None,
                 loader: Optional[DictionaryLoader] = None,
                 path_provider: Optional[PathProvider] = None):
        """
        Args:
            config: Начальная конфигурация (по умолчанию I18nConfig())
            loader: Загрузчик словарей; по умолчанию выбирается по locales_path
            path_provider: Источник текущего пути URL для use_url_lang
        """
        self.config = config or I18nConfig()
        self.loader = loader
        self.path_provider = path_provider
        self.store = LocaleStore(loader)
        self.translator = Translator(self.store, self.config)

    def initialize(self, config: Optional[Mapping[str, Any]] = None,
                   **overrides: Any) -> LocaleStore:
        """
        Сливает конфигурацию и загружает все поддерживаемые языки.

        Повторный вызов дополняет конфигурацию предыдущего. Возврат
        происходит только после завершения (или ошибки) загрузки
        каждого языка.

        Args:
            config: Частичная конфигурация (snake_case или camelCase)
            **overrides: Те же поля в виде именованных аргументов

        Returns:
            Хранилище с загруженными словарями
        """
        merged = self.config.merge(config, **overrides)

        if not merged.supported_langs:
            merged = merged.merge(supported_langs=[merged.default_lang or FALLBACK_LANG])

        if merged.use_url_lang:
            url_lang = self._lang_from_url()
            if url_lang and url_lang in merged.supported_langs:
                merged = merged.merge(current_lang=url_lang)
            elif url_lang:
                logger.debug("Язык из URL %r не поддерживается, оставлен %r",
                             url_lang, merged.current_lang)

        self.config = merged
        self.translator.config = merged

        self.store.load_all(merged.locales_path or "", merged.supported_langs)
        logger.info("i18n инициализирован: язык=%s, поддерживаются=%s",
                    merged.effective_lang, merged.supported_langs)
        return self.store

    def _lang_from_url(self) -> Optional[str]:
        if self.path_provider is None:
            return None
        return detect_lang_from_url(self.path_provider() or "")

    def t(self, key: str, count: Optional[float] = None,
          lang: Optional[str] = None) -> Optional[str]:
        """Перевод ключа, см. Translator.resolve()."""
        return self.translator.resolve(key, count, lang)

    def get_translation(self, lang: Optional[str] = None) -> BoundTranslation:
        """Объект с функцией t, закреплённой за языком lang."""
        return self.translator.bind(lang)

    @property
    def current_lang(self) -> str:
        return self.config.effective_lang

    def __repr__(self) -> str:
        return f"I18n(lang={self.current_lang!r}, langs={self.config.supported_langs!r})"
