# app/cmdline/help_text.py
"""
Текст справки для -h/--help.

Шаблон фиксированный, подписи подставляются по порядку слотов {0}..{19}.
Перевод подписей делает Qt (QCoreApplication.translate); без установленного
переводчика возвращается исходная строка.
"""
from __future__ import annotations

from typing import List

from PyQt5.QtCore import QCoreApplication

TRANSLATION_CONTEXT = "CommandlineOptions"

HELP_TEMPLATE = (
    "{0}: {app} [{1}] [{2}]\n"
    "\n"
    "{3}:\n"
    "  -p, --play                {4}\n"
    "  -t, --play-pause          {5}\n"
    "  -u, --pause               {6}\n"
    "  -s, --stop                {7}\n"
    "  -r, --previous            {8}\n"
    "  -f, --next                {9}\n"
    "  -v, --volume <value>      {10}\n"
    "  --volume-up               {11}\n"
    "  --volume-down             {12}\n"
    "  --seek-to <seconds>       {13}\n"
    "\n"
    "{14}:\n"
    "  -a, --append              {15}\n"
    "  -l, --load                {16}\n"
    "  -k, --play-track <n>      {17}\n"
    "\n"
    "{18}:\n"
    "  -o, --show-osd            {19}\n"
)

# Порядок важен: индекс в списке == номер слота в шаблоне
HELP_LABELS = (
    "Usage",
    "options",
    "URL(s)",
    "Player options",
    "Start the playlist currently playing",
    "Play if stopped, pause if playing",
    "Pause playback",
    "Stop playback",
    "Skip backwards in playlist",
    "Skip forwards in playlist",
    "Set the volume to <value> percent",
    "Increase the volume by 4%",
    "Decrease the volume by 4%",
    "Seek the currently playing track",
    "Playlist options",
    "Append files/URLs to the playlist",
    "Loads files/URLs, replacing current playlist",
    "Play the <n>th track in the playlist",
    "Other options",
    "Display the on-screen-display",
)


def tr(source_text: str) -> str:
    return QCoreApplication.translate(TRANSLATION_CONTEXT, source_text)


def translated_labels() -> List[str]:
    return [tr(label) for label in HELP_LABELS]


def format_help(app_name: str = "clementine") -> str:
    return HELP_TEMPLATE.format(*translated_labels(), app=app_name)
