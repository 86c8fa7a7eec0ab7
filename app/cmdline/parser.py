# app/cmdline/parser.py
"""
Разбор argv плеера в неизменяемый Options.

Грамматика фиксированная (см. таблицу флагов в help_text). Повтор флага
перезаписывает предыдущее значение, флаги и файлы/URL можно перемешивать:
позиционные аргументы собираются строго слева направо.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Sequence, TextIO

from PyQt5.QtCore import QFileInfo, QUrl

from app.cmdline.errors import HelpRequested, OptionParseError
from app.cmdline.help_text import format_help
from app.cmdline.options import VOLUME_STEP, Options, PlayerAction, UrlListAction

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")
INT32_MAX = 2 ** 31 - 1


def parse_optional_int(value: str) -> Optional[int]:
    """
    "42" -> 42, мусор -> None.

    Отрицательные значения тоже считаются отсутствующими: -1 на проводе
    означает "не задано", и пропускать другие отрицательные числа нельзя.
    """
    if not _INT_RE.match(value):
        return None
    number = int(value)
    if number < 0 or number > INT32_MAX:
        return None
    return number


def url_from_argument(value: str) -> str:
    if "://" in value:
        return value
    return QUrl.fromLocalFile(QFileInfo(value).absoluteFilePath()).toString()


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest, app_name="clementine", stream=None, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)
        self.app_name = app_name
        self.stream = stream

    def __call__(self, parser, namespace, values, option_string=None):
        text = format_help(self.app_name)
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()
        # дальше не разбираем: ни один флаг после -h не должен сработать
        raise HelpRequested(text)


class OptionsArgumentParser(argparse.ArgumentParser):
    """ArgumentParser, который не вызывает sys.exit() на ошибках."""

    def error(self, message):
        raise OptionParseError(message)


def build_parser(app_name: str = "clementine", stdout: Optional[TextIO] = None) -> OptionsArgumentParser:
    p = OptionsArgumentParser(prog=app_name, add_help=False)
    p.add_argument("-h", "--help", action=_HelpAction, app_name=app_name, stream=stdout)

    player = p.add_argument_group("Player options")
    player.set_defaults(player_action=PlayerAction.NONE)
    for flags, action in (
        (("-p", "--play"), PlayerAction.PLAY),
        (("-t", "--play-pause"), PlayerAction.PLAY_PAUSE),
        (("-u", "--pause"), PlayerAction.PAUSE),
        (("-s", "--stop"), PlayerAction.STOP),
        (("-r", "--previous"), PlayerAction.PREVIOUS),
        (("-f", "--next"), PlayerAction.NEXT),
    ):
        player.add_argument(*flags, dest="player_action", action="store_const", const=action)
    player.add_argument("-v", "--volume", dest="set_volume", type=parse_optional_int, default=None)
    player.add_argument("--volume-up", dest="volume_modifier", action="store_const", const=VOLUME_STEP, default=0)
    player.add_argument("--volume-down", dest="volume_modifier", action="store_const", const=-VOLUME_STEP, default=0)
    player.add_argument("--seek-to", dest="seek_to", type=parse_optional_int, default=None)

    playlist = p.add_argument_group("Playlist options")
    playlist.set_defaults(url_list_action=UrlListAction.APPEND)
    playlist.add_argument("-a", "--append", dest="url_list_action", action="store_const", const=UrlListAction.APPEND)
    playlist.add_argument("-l", "--load", dest="url_list_action", action="store_const", const=UrlListAction.LOAD)
    playlist.add_argument("-k", "--play-track", dest="play_track_at", type=parse_optional_int, default=None)

    other = p.add_argument_group("Other options")
    other.add_argument("-o", "--show-osd", dest="show_osd", action="store_true")

    p.add_argument("urls", nargs="*", default=[])
    return p


def parse_options(
    args: Sequence[str],
    *,
    app_name: str = "clementine",
    stdout: Optional[TextIO] = None,
) -> Options:
    """
    Разобрать аргументы (без имени программы).

    Raises:
        HelpRequested: был -h/--help, справка уже записана в stdout.
        OptionParseError: неизвестный флаг или нет обязательного аргумента.
    """
    args = list(args)
    # после "--" всё - файлы/URL, даже если начинается с "-"
    tail = []
    if "--" in args:
        split = args.index("--")
        args, tail = args[:split], args[split + 1:]

    parser = build_parser(app_name, stdout)
    ns = parser.parse_intermixed_args(args)

    options = Options(
        player_action=ns.player_action,
        url_list_action=ns.url_list_action,
        set_volume=ns.set_volume,
        volume_modifier=ns.volume_modifier,
        seek_to=ns.seek_to,
        play_track_at=ns.play_track_at,
        show_osd=ns.show_osd,
        urls=tuple(url_from_argument(value) for value in [*ns.urls, *tail]),
    )
    logger.debug(f"Parsed command line: {options.describe()}")
    return options
