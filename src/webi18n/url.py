"""Определение языка по префиксу пути URL: /fr/about -> "fr"."""

import re
from typing import Optional
from urllib.parse import urlsplit

# Ровно две ASCII-буквы после ведущего "/", затем "/" или конец строки
LANG_CODE_RE = re.compile(r"^/([a-z]{2})(?:/|\Z)", re.IGNORECASE | re.ASCII)


def detect_lang_from_url(path: str) -> Optional[str]:
    """
    Извлекает код языка из пути.

    Принимает как путь ("/fr/about"), так и полный URL
    ("https://site.test/fr/about") - тогда берётся его path.

    Returns:
        Код языка в нижнем регистре или None
    """
    if not path:
        return None
    if "://" in path:
        path = urlsplit(path).path
    match = LANG_CODE_RE.match(path)
    return match.group(1).lower() if match else None
