# app/cmdline/options.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple


class PlayerAction(IntEnum):
    # значения фиксированы: они же уходят по проводу как int32
    NONE = 0
    PLAY = 1
    PLAY_PAUSE = 2
    PAUSE = 3
    STOP = 4
    PREVIOUS = 5
    NEXT = 6


class UrlListAction(IntEnum):
    APPEND = 0
    LOAD = 1


VOLUME_STEP = 4


@dataclass(frozen=True)
class Options:
    player_action: PlayerAction = PlayerAction.NONE
    url_list_action: UrlListAction = UrlListAction.APPEND
    set_volume: Optional[int] = None       # 0..100, не проверяется здесь
    volume_modifier: int = 0               # +4 / -4
    seek_to: Optional[int] = None          # секунды
    play_track_at: Optional[int] = None    # индекс в плейлисте
    show_osd: bool = False
    urls: Tuple[str, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        """True, если в командной строке не было ни одной команды для плеера."""
        return (
            self.player_action == PlayerAction.NONE
            and self.set_volume is None
            and self.volume_modifier == 0
            and self.seek_to is None
            and self.play_track_at is None
            and not self.show_osd
            and not self.urls
        )

    def describe(self) -> str:
        """Короткое описание для логов."""
        parts = [f"action={self.player_action.name.lower()}",
                 f"urls={self.url_list_action.name.lower()}:{len(self.urls)}"]
        if self.set_volume is not None:
            parts.append(f"volume={self.set_volume}")
        if self.volume_modifier:
            parts.append(f"volume_modifier={self.volume_modifier:+d}")
        if self.seek_to is not None:
            parts.append(f"seek_to={self.seek_to}s")
        if self.play_track_at is not None:
            parts.append(f"play_track={self.play_track_at}")
        if self.show_osd:
            parts.append("osd")
        return " ".join(parts)


def is_empty(options: Options) -> bool:
    return options.is_empty()
