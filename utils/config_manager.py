# utils/config_manager.py
from dataclasses import dataclass
import configparser
import os

DEFAULT_APP_NAME = "clementine"
DEFAULT_LOGGING_CONFIG = os.path.join("config", "logging.conf")


@dataclass
class CommandLineConfig:
    app_name: str = DEFAULT_APP_NAME


@dataclass
class LoggingConfig:
    config_file: str = DEFAULT_LOGGING_CONFIG
    log_dir: str = "logs"
    level: str = "INFO"


class ConfigManager:
    def __init__(self, config_file=None):
        self.config = configparser.ConfigParser()
        self.config_file = config_file
        if config_file:
            self.config.read(config_file, encoding="utf-8")

        # Ленивая загрузка секций
        self._command_line_config = None
        self._logging_config = None

    @classmethod
    def from_env(cls, default_path, env_var="PLAYER_CONFIG"):
        """Путь к config.ini можно переопределить переменной окружения (.env тоже подходит)."""
        return cls(os.environ.get(env_var) or default_path)

    @property
    def command_line(self) -> CommandLineConfig:
        """Настройки разбора командной строки (ленивая загрузка)"""
        if self._command_line_config is None:
            self._command_line_config = CommandLineConfig(
                app_name=self.get_setting("CommandLine", "app_name", DEFAULT_APP_NAME),
            )
        return self._command_line_config

    @property
    def logging(self) -> LoggingConfig:
        """Настройки логирования (ленивая загрузка)"""
        if self._logging_config is None:
            self._logging_config = self._load_logging_config()
        return self._logging_config

    def _load_logging_config(self) -> LoggingConfig:
        defaults = LoggingConfig()
        config_file = self.get_setting("Logging", "config_file", defaults.config_file)
        log_dir = self.get_setting("Logging", "log_dir", defaults.log_dir)
        # относительные пути считаем от корня приложения (папка над config/)
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(self.config_file))) if self.config_file else os.getcwd()
        return LoggingConfig(
            config_file=config_file if os.path.isabs(config_file) else os.path.join(base_dir, config_file),
            log_dir=log_dir if os.path.isabs(log_dir) else os.path.join(base_dir, log_dir),
            level=self.get_setting("Logging", "level", defaults.level).upper(),
        )

    def get_setting(self, section, setting, default=None):
        if not self.config.has_section(section):
            return default
        return self.config[section].get(setting, default)
