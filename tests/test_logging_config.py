"""Tests for the shared logging configuration."""

from rest_services.app.core.logging_config import LOG_FORMAT, build_logging_config


def test_uvicorn_loggers_go_through_root_handlers() -> None:
    config = build_logging_config("warning")
    assert config["root"] == {"level": "WARNING", "handlers": ["console"]}
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        assert config["loggers"][name] == {"level": "WARNING", "handlers": [], "propagate": True}
    assert config["formatters"]["default"]["format"] == LOG_FORMAT


def test_urllib3_never_logs_below_info() -> None:
    assert build_logging_config("DEBUG")["loggers"]["urllib3"]["level"] == "INFO"
    assert build_logging_config("ERROR")["loggers"]["urllib3"]["level"] == "ERROR"


def test_unknown_level_falls_back_to_info() -> None:
    assert build_logging_config("chatty")["root"]["level"] == "INFO"


def test_log_file_adds_file_handler(tmp_path) -> None:
    logfile = tmp_path / "services.log"
    config = build_logging_config("INFO", str(logfile))
    assert config["root"]["handlers"] == ["console", "file"]
    assert config["handlers"]["file"]["filename"] == str(logfile.resolve())
