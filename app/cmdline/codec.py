# app/cmdline/codec.py
"""
Бинарный формат Options для передачи уже запущенному экземпляру.

Поля пишутся подряд через QDataStream (big-endian, версия потока Qt 5.0):
player_action, url_list_action, set_volume, volume_modifier, seek_to,
play_track_at как int32, show_osd как 1 байт, затем urls как uint32 +
QString на каждый элемент. Отсутствующие числа кодируются как -1.
"""
from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import QByteArray, QDataStream, QIODevice

from app.cmdline.errors import OptionsDecodeError
from app.cmdline.options import Options, PlayerAction, UrlListAction

logger = logging.getLogger(__name__)

STREAM_VERSION = QDataStream.Qt_5_0
ABSENT = -1


def _to_wire(value: Optional[int]) -> int:
    return ABSENT if value is None else value


def _from_wire(value: int) -> Optional[int]:
    return None if value < 0 else value


def serialize(options: Options) -> bytes:
    buf = QByteArray()
    stream = QDataStream(buf, QIODevice.WriteOnly)
    stream.setVersion(STREAM_VERSION)

    stream.writeInt32(int(options.player_action))
    stream.writeInt32(int(options.url_list_action))
    stream.writeInt32(_to_wire(options.set_volume))
    stream.writeInt32(options.volume_modifier)
    stream.writeInt32(_to_wire(options.seek_to))
    stream.writeInt32(_to_wire(options.play_track_at))
    stream.writeBool(bool(options.show_osd))
    stream.writeUInt32(len(options.urls))
    for url in options.urls:
        stream.writeQString(url)

    return buf.data()


def deserialize(data: bytes) -> Options:
    """
    Собрать новый Options из байтов serialize().

    Raises:
        OptionsDecodeError: данные обрезаны, есть лишние байты в конце
            или неизвестное значение перечисления.
    """
    buf = QByteArray(bytes(data))
    stream = QDataStream(buf, QIODevice.ReadOnly)
    stream.setVersion(STREAM_VERSION)

    player_action = stream.readInt32()
    url_list_action = stream.readInt32()
    set_volume = stream.readInt32()
    volume_modifier = stream.readInt32()
    seek_to = stream.readInt32()
    play_track_at = stream.readInt32()
    show_osd = stream.readBool()
    count = stream.readUInt32()
    _check_status(stream, "header")

    urls = []
    for index in range(count):
        url = stream.readQString()
        _check_status(stream, f"url #{index}")
        urls.append(url)

    if not stream.atEnd():
        raise OptionsDecodeError("Unexpected trailing bytes after options payload")

    try:
        player_action = PlayerAction(player_action)
        url_list_action = UrlListAction(url_list_action)
    except ValueError as e:
        raise OptionsDecodeError(f"Unknown action in options payload: {e}") from e

    options = Options(
        player_action=player_action,
        url_list_action=url_list_action,
        set_volume=_from_wire(set_volume),
        volume_modifier=volume_modifier,
        seek_to=_from_wire(seek_to),
        play_track_at=_from_wire(play_track_at),
        show_osd=show_osd,
        urls=tuple(urls),
    )
    logger.debug(f"Decoded options: {options.describe()}")
    return options


def _check_status(stream: QDataStream, where: str) -> None:
    status = stream.status()
    if status == QDataStream.ReadPastEnd:
        raise OptionsDecodeError(f"Options payload is truncated ({where})")
    if status != QDataStream.Ok:
        raise OptionsDecodeError(f"Options payload is corrupt ({where}, status {status})")
