"""
Plurals - выбор CLDR-категории множественного числа.

Правила берутся из CLDR через Babel: для "en" различаются one/other,
для "ru" one/few/many/other, для "ar" все шесть категорий.
"""

import functools
import logging
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.plural import PluralRule

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=64)
def _rule_for(lang: str) -> Optional[PluralRule]:
    try:
        return Locale.parse(lang.replace("-", "_")).plural_form
    except (UnknownLocaleError, ValueError) as exc:
        logger.debug("Нет CLDR-правил для языка %r: %s", lang, exc)
        return None


def plural_category(count: float, lang: str) -> str:
    """
    Категория множественного числа для count в языке lang.

    Неизвестный язык - всегда "other".
    """
    rule = _rule_for(lang)
    if rule is None:
        return "other"
    return rule(count)
