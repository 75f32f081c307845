"""Иерархия исключений webi18n."""


class I18nError(Exception):
    """Базовое исключение пакета."""


class ConfigError(I18nError):
    """Некорректная конфигурация (неизвестное поле, неверный тип, битый YAML)."""


class LoaderError(I18nError):
    """Не удалось загрузить словарь языка."""

    def __init__(self, lang: str, source: str, reason: str):
        self.lang = lang
        self.source = source
        self.reason = reason
        super().__init__(f"[{lang}] {source}: {reason}")


class CheckerError(I18nError):
    """Ошибка проверки полноты переводов (нет директории, битый JSON)."""
