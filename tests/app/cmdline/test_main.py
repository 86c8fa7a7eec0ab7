import io
import logging
import logging.config

from app.cmdline.codec import deserialize
from app.cmdline.main import EXIT_OK, EXIT_PARSE_ERROR, configure_logging, run
from app.cmdline.options import PlayerAction
from utils.config_manager import LoggingConfig


class FakeTransport:
    def __init__(self):
        self.sent = []

    def __call__(self, payload):
        self.sent.append(payload)


def test_help_exits_ok_without_forwarding():
    transport = FakeTransport()
    out = io.StringIO()
    assert run(["-h", "-p"], forward=transport, stdout=out) == EXIT_OK
    assert "Usage:" in out.getvalue()
    assert transport.sent == []


def test_parse_error_exits_non_zero():
    err = io.StringIO()
    assert run(["--not-a-flag"], app_name="player", stderr=err) == EXIT_PARSE_ERROR
    assert err.getvalue().startswith("player: ")


def test_empty_command_line_is_not_forwarded():
    transport = FakeTransport()
    assert run([], forward=transport) == EXIT_OK
    assert run(["-a", "--volume", "bad"], forward=transport) == EXIT_OK
    assert transport.sent == []


def test_options_are_forwarded_serialized():
    transport = FakeTransport()
    assert run(["-t", "http://example.com/x"], forward=transport) == EXIT_OK
    assert len(transport.sent) == 1
    options = deserialize(transport.sent[0])
    assert options.player_action == PlayerAction.PLAY_PAUSE
    assert options.urls == ("http://example.com/x",)


def test_run_logs_parsed_options(caplog):
    with caplog.at_level(logging.INFO, logger="app.cmdline.main"):
        run(["--stop"])
    assert "action=stop" in caplog.text


def test_configure_logging_falls_back_without_config_file(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging(LoggingConfig(config_file=str(tmp_path / "missing.conf"), log_dir=str(tmp_path), level="DEBUG"))
    assert calls and calls[0]["level"] == "DEBUG"


def test_configure_logging_uses_file_config(tmp_path, monkeypatch):
    conf = tmp_path / "logging.conf"
    conf.write_text("x")
    seen = {}

    def fake_file_config(path, defaults=None, disable_existing_loggers=True):
        seen.update(path=path, defaults=defaults, disable=disable_existing_loggers)

    monkeypatch.setattr(logging.config, "fileConfig", fake_file_config)
    root_level = logging.getLogger().level
    try:
        configure_logging(LoggingConfig(config_file=str(conf), log_dir=str(tmp_path / "logs"), level="WARNING"))
        assert logging.getLogger().level == logging.WARNING
    finally:
        logging.getLogger().setLevel(root_level)
    assert seen["path"] == str(conf)
    assert seen["defaults"] == {"log_dir": str(tmp_path / "logs")}
    assert seen["disable"] is False
    assert (tmp_path / "logs").is_dir()
