#!/usr/bin/env python3
"""
CLI - проверка отсутствующих переводов.

Читает все словари из директории локалей, сканирует исходники на вызовы
t("key") и проверяет, что каждый ключ есть в каждом поддерживаемом языке.

Коды выхода:
  0  все переводы на месте
  1  найдены отсутствующие переводы
  2  ошибка (нет директории, битый JSON)

Использование:
  check-translations --languages=en,fr --locales=./locales --src=./src
  python -m webi18n.cli --extensions=tsx,vue --output=reports/i18n.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .checker import (DEFAULT_EXTENSIONS, DEFAULT_LANGUAGES, CheckReport,
                      TranslationChecker)
from .exceptions import CheckerError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_ERROR = 2


class Colors:
    """ANSI-цвета вывода; с enabled=False все коды пустые."""

    def __init__(self, enabled: bool = True):
        self.red = "\x1b[31m" if enabled else ""
        self.green = "\x1b[32m" if enabled else ""
        self.yellow = "\x1b[33m" if enabled else ""
        self.blue = "\x1b[34m" if enabled else ""
        self.reset = "\x1b[0m" if enabled else ""


def split_list(value: str) -> List[str]:
    """Список через запятую: "en, fr" -> ["en", "fr"]."""
    return [part.strip() for part in value.split(",") if part.strip()]


def print_report(report: CheckReport, colors: Colors) -> None:
    """Выводит находки и итоговую строку."""
    for finding in report.findings:
        print(f"{colors.red}❌ Отсутствует перевод ключа "
              f"\"{colors.blue}{finding.key}{colors.red}\" в: "
              f"[{', '.join(finding.missing_langs)}]{colors.reset}")
        print(f"    └── Файл: {finding.file}")

    if report.findings:
        print(f"{colors.red}\nНайдены отсутствующие переводы! ⛔ "
              f"({len(report.findings)}){colors.reset}")
    else:
        print(f"{colors.green}Все переводы на месте! ✨ "
              f"(ключей: {report.keys_checked}, файлов: {report.files_scanned}){colors.reset}")


def build_parser() -> argparse.ArgumentParser:
    """Строит парсер аргументов."""
    parser = argparse.ArgumentParser(
        prog="check-translations",
        description="Проверка отсутствующих переводов в исходниках проекта",
    )
    parser.add_argument("--languages", type=split_list, default=list(DEFAULT_LANGUAGES),
                        help="Поддерживаемые языки через запятую (по умолчанию: en)")
    parser.add_argument("--locales", default="./locales",
                        help="Директория с JSON-словарями (по умолчанию: ./locales)")
    parser.add_argument("--src", default="./src",
                        help="Директория исходников (по умолчанию: ./src)")
    parser.add_argument("--extensions", type=split_list, default=list(DEFAULT_EXTENSIONS),
                        help="Расширения файлов через запятую, точка необязательна "
                             "(по умолчанию: .astro,.jsx,.tsx,.vue)")
    parser.add_argument("--output", default="",
                        help="Сохранить отчёт в JSON-файл")
    parser.add_argument("--no-color", action="store_true",
                        help="Вывод без ANSI-цветов")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Подробный лог (DEBUG)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    logger.debug("Аргументы: %s", vars(args))

    colors = Colors(enabled=not args.no_color)
    print(f"{colors.yellow}Проверка отсутствующих переводов...\n{colors.reset}")

    cwd = Path.cwd()
    checker = TranslationChecker(
        locales_dir=cwd / args.locales,
        src_dir=cwd / args.src,
        languages=args.languages or DEFAULT_LANGUAGES,
        extensions=args.extensions or DEFAULT_EXTENSIONS,
    )

    try:
        report = checker.run()
    except CheckerError as exc:
        print(f"{colors.red}Ошибка: {exc}{colors.reset}", file=sys.stderr)
        return EXIT_ERROR

    print_report(report, colors)

    if args.output:
        saved = checker.save_report(report, cwd / args.output)
        print(f"  Отчёт сохранён: {saved}")

    return EXIT_OK if report.is_complete else EXIT_MISSING


if __name__ == "__main__":
    sys.exit(main())
