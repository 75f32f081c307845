"""
Checker - проверка полноты переводов.

Алгоритм:
1. Рекурсивно читает JSON-словари из директории локалей:
   en.json, en-US.json, pages/en.json -> язык "en"; файлы одного языка
   сливаются, при совпадении ключей побеждает файл, прочитанный позже.
2. Рекурсивно сканирует исходники (.astro, .jsx, .tsx, .vue) и извлекает
   ключи из вызовов t("key") / t('key').
3. Для каждого найденного ключа проверяет наличие непустого значения
   в каждом поддерживаемом языке.

Это приближённый статический анализ: ключи, собранные динамически
(конкатенация, переменные), сканер не видит.
"""

import json
import logging
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Union

from .exceptions import CheckerError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [".astro", ".jsx", ".tsx", ".vue"]
DEFAULT_LANGUAGES = ["en"]

# t("key") или t('key'), но не import("x") / gettext("x")
TRANSLATION_CALL_RE = re.compile(r"""(?<!\w)t\((["'])(.*?)\1\)""")


@dataclass
class SourceKeys:
    """Ключи, найденные в одном файле (с повторами)."""
    file: str
    keys: List[str]


@dataclass
class MissingTranslation:
    """Ключ без перевода хотя бы в одном языке."""
    key: str
    file: str
    missing_langs: List[str]


@dataclass
class CheckReport:
    """Результат проверки."""
    timestamp: str = ""
    languages: List[str] = field(default_factory=list)
    files_scanned: int = 0
    keys_checked: int = 0
    keys_by_lang: Dict[str, int] = field(default_factory=dict)
    findings: List[MissingTranslation] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.findings

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["is_complete"] = self.is_complete
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


def normalize_extensions(extensions: Sequence[str]) -> List[str]:
    """Расширения с точкой: "tsx" -> ".tsx"; пустые отбрасываются."""
    result = []
    for ext in extensions:
        ext = ext.strip()
        if ext:
            result.append(ext if ext.startswith(".") else f".{ext}")
    return result


def lang_of_locale_file(path: Path) -> str:
    """en-US.json -> "en"."""
    return path.stem.split("-")[0]


def extract_translation_keys(content: str) -> List[str]:
    """Все ключи из вызовов t("...") в тексте, в порядке появления."""
    return [match.group(2) for match in TRANSLATION_CALL_RE.finditer(content)]


def _walk(directory: Path) -> Iterator[Path]:
    """Обход в глубину; записи директории в отсортированном порядке."""
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            yield from _walk(entry)
        else:
            yield entry


def _require_dir(path: Path, label: str) -> None:
    if not path.is_dir():
        raise CheckerError(f"{label}: директория не найдена: {path}")


def load_locale_tree(locales_dir: Union[str, Path],
                     languages: Sequence[str]) -> Dict[str, Dict]:
    """
    Загружает и сливает словари всех поддерживаемых языков.

    Returns:
        Dict[lang, merged_dictionary]; для языков без файлов - пустой словарь

    Raises:
        CheckerError: нет директории, битый JSON или JSON не объект
    """
    locales_dir = Path(locales_dir)
    _require_dir(locales_dir, "Локали")

    translations: Dict[str, Dict] = {lang: {} for lang in languages}

    for path in _walk(locales_dir):
        if path.suffix != ".json":
            continue
        lang = lang_of_locale_file(path)
        if lang not in translations:
            logger.debug("Пропуск %s: язык %r не поддерживается", path, lang)
            continue

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CheckerError(f"Ошибка чтения словаря {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise CheckerError(f"{path}: ожидался JSON-объект")

        overwritten = set(translations[lang]) & set(data)
        if overwritten:
            logger.debug("%s перезаписывает ключи [%s]: %s", path, lang, sorted(overwritten))
        translations[lang].update(data)

    return translations


def scan_sources(src_dir: Union[str, Path],
                 extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Iterator[SourceKeys]:
    """
    Обходит исходники и выдаёт SourceKeys для каждого подходящего файла.

    Файлы без вызовов t() тоже выдаются (с пустым списком ключей).
    """
    src_dir = Path(src_dir)
    _require_dir(src_dir, "Исходники")
    suffixes = tuple(normalize_extensions(extensions))

    for path in _walk(src_dir):
        if not path.name.endswith(suffixes):
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Пропуск %s: %s", path, exc)
            continue
        yield SourceKeys(file=str(path), keys=extract_translation_keys(content))


class TranslationChecker:
    """Проверка: каждый ключ из исходников есть в каждом языке."""

    def __init__(self, locales_dir: Union[str, Path], src_dir: Union[str, Path],
                 languages: Optional[Sequence[str]] = None,
                 extensions: Optional[Sequence[str]] = None):
        self.locales_dir = Path(locales_dir)
        self.src_dir = Path(src_dir)
        self.languages = list(dict.fromkeys(languages or DEFAULT_LANGUAGES))
        self.extensions = normalize_extensions(extensions or DEFAULT_EXTENSIONS)
        self.translations: Dict[str, Dict] = {}

    def run(self) -> CheckReport:
        """Загружает словари, сканирует исходники, собирает находки."""
        self.translations = load_locale_tree(self.locales_dir, self.languages)

        report = CheckReport(
            timestamp=datetime.now().isoformat(),
            languages=list(self.languages),
            keys_by_lang={lang: len(d) for lang, d in self.translations.items()},
        )

        for source in scan_sources(self.src_dir, self.extensions):
            report.files_scanned += 1
            for key in source.keys:
                report.keys_checked += 1
                missing = [lang for lang in self.languages
                           if not self.translations[lang].get(key)]
                if missing:
                    report.findings.append(MissingTranslation(key, source.file, missing))

        logger.info("Проверено ключей: %d в %d файлах, отсутствует: %d",
                    report.keys_checked, report.files_scanned, len(report.findings))
        return report

    @staticmethod
    def save_report(report: CheckReport, output_path: Union[str, Path]) -> Path:
        """Сохраняет отчёт в JSON-файл."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report.to_json())
        return output_path
