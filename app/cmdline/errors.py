# app/cmdline/errors.py
from __future__ import annotations


class CommandLineError(Exception):
    """Базовая ошибка разбора/передачи параметров командной строки."""


class HelpRequested(CommandLineError):
    """
    Пользователь попросил справку (-h/--help).

    Не ошибка: текст уже выведен, вызывающий код должен завершиться
    без выполнения каких-либо действий плеера.
    """

    def __init__(self, text: str) -> None:
        super().__init__("help requested")
        self.text = text


class OptionParseError(CommandLineError):
    """Неизвестный флаг или флаг без обязательного аргумента."""


class OptionsDecodeError(CommandLineError):
    """Байты от другого экземпляра приложения обрезаны или повреждены."""
