# app/cmdline/main.py
import logging
import logging.config
import os
import sys
from typing import Callable, Optional, Sequence, TextIO

from dotenv import load_dotenv

from app.cmdline.codec import serialize
from app.cmdline.errors import HelpRequested, OptionParseError
from app.cmdline.parser import parse_options
from utils.config_manager import ConfigManager, LoggingConfig

EXIT_OK = 0
EXIT_PARSE_ERROR = 1

logger = logging.getLogger(__name__)


def resource_path(*parts: str) -> str:
    """
    Корень приложения:
      - dev: папка над app/
      - frozen: рядом с exe
    """
    if getattr(sys, "frozen", False):
        base = os.path.dirname(sys.executable)
    else:
        base = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base, *parts)


def configure_logging(config: LoggingConfig) -> None:
    if os.path.exists(config.config_file):
        os.makedirs(config.log_dir, exist_ok=True)
        logging.config.fileConfig(config.config_file,
                                  defaults={"log_dir": config.log_dir},
                                  disable_existing_loggers=False)
        logging.getLogger().setLevel(config.level)
    else:
        logging.basicConfig(level=config.level,
                            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        logger.warning(f"Logging config {config.config_file} not found, using basicConfig")


def log_exception(exc_type, exc_value, exc_traceback):
    """Logging unexpected exceptions."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical("Unexpected exception", exc_info=(exc_type, exc_value, exc_traceback))


def run(
    argv: Sequence[str],
    *,
    app_name: str = "clementine",
    forward: Optional[Callable[[bytes], None]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Разобрать argv и вернуть код выхода.

    forward - транспорт до уже запущенного экземпляра; получает байты
    serialize(), если в командной строке была хоть одна команда.
    """
    try:
        options = parse_options(argv, app_name=app_name, stdout=stdout)
    except HelpRequested:
        logger.debug("Help requested, nothing to execute")
        return EXIT_OK
    except OptionParseError as e:
        logger.error(f"Invalid command line {list(argv)!r}: {e}")
        (stderr or sys.stderr).write(f"{app_name}: {e}\n")
        return EXIT_PARSE_ERROR

    if options.is_empty():
        logger.info("No command line actions, plain launch")
        return EXIT_OK

    logger.info(f"Command line: {options.describe()}")
    if forward is not None:
        payload = serialize(options)
        logger.debug(f"Forwarding {len(payload)} bytes to running instance")
        forward(payload)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    config_manager = ConfigManager.from_env(resource_path("config", "config.ini"))
    configure_logging(config_manager.logging)
    sys.excepthook = log_exception

    if argv is None:
        argv = sys.argv[1:]
    return run(argv, app_name=config_manager.command_line.app_name)
