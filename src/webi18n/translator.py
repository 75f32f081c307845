"""
Translator - резолв ключа перевода в строку.

Порядок выбора языка: явный lang -> current_lang -> default_lang -> "en".

Значение ключа - либо строка, либо запись множественного числа:
    {"one": "{count} file", "other": "{count} files"}
Категория выбирается по CLDR-правилам языка; отсутствующая
категория заменяется на "other".

Отсутствующий ключ не является ошибкой: пишется предупреждение в лог
и возвращается сам ключ.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .config import I18nConfig
from .plurals import plural_category
from .store import LocaleStore

logger = logging.getLogger(__name__)

TranslateFunc = Callable[..., Optional[str]]


@dataclass
class BoundTranslation:
    """Функция t, закреплённая за языком lang."""
    lang: str
    t: TranslateFunc


class Translator:
    """Резолвер ключей поверх LocaleStore."""

    def __init__(self, store: LocaleStore, config: Optional[I18nConfig] = None):
        self.store = store
        self.config = config or I18nConfig()

    def resolve(self, key: str, count: Optional[float] = None,
                lang: Optional[str] = None) -> Optional[str]:
        """
        Возвращает перевод ключа.

        Args:
            key: Ключ перевода
            count: Число для выбора формы множественного числа
            lang: Язык; по умолчанию текущий язык конфигурации

        Returns:
            Перевод; сам ключ, если перевода нет; None для записи
            множественного числа без категории "other"
        """
        lang = lang or self.config.effective_lang
        translation = self.store.lookup(lang, key)

        if isinstance(translation, dict):
            if count is not None:
                category = plural_category(count, lang)
                return translation.get(category) or translation.get("other")
            return translation.get("other")

        if isinstance(translation, str):
            return translation

        logger.warning('Перевод не найден для ключа: "%s" (lang=%s)', key, lang)
        return key

    __call__ = resolve

    def bind(self, lang: Optional[str] = None) -> BoundTranslation:
        """
        BoundTranslation с функцией t(key, count=None) для одного языка.

        Язык фиксируется в момент вызова bind().
        """
        bound_lang = lang or self.config.effective_lang

        def t(key: str, count: Optional[float] = None) -> Optional[str]:
            return self.resolve(key, count, bound_lang)

        return BoundTranslation(lang=bound_lang, t=t)

    def has(self, key: str, lang: Optional[str] = None) -> bool:
        return self.store.lookup(lang or self.config.effective_lang, key) is not None

    def __repr__(self) -> str:
        return f"Translator(lang={self.config.effective_lang!r}, store={self.store!r})"
