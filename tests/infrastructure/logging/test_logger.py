"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_builder_writes_daily_file_under_subdir(tmp_path, monkeypatch):
    """Built loggers should write to logs/<subdir>/<date>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20241017"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("subscriptions-test-file")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20241017_report_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    assert builder.build() is built
    built.handlers[0].close()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Injected factories should produce the handlers and formatter."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["file_formatter"] = formatter
        return file_handler

    def _console_factory(formatter):
        seen["console_formatter"] = formatter
        return console_handler

    built = (
        logger_module.LoggerBuilder()
        .name("subscriptions-test-factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(_console_factory)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["file_formatter"] is fmt
    assert seen["console_formatter"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "app"


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()

    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(
        fmt
    )

    assert file_handler.formatter is fmt
    assert file_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_levels(monkeypatch):
    """Wrapper methods should forward messages to the built logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    wrapper = logger_module.get_app_logger()
    wrapper.info("chart built")
    wrapper.warning("unsupported cycle")
    wrapper.error("database down")
    wrapper.debug("sectors=%s", 3)
    wrapper.critical("stop")

    fake_logger.info.assert_called_with("chart built")
    fake_logger.warning.assert_called_with("unsupported cycle")
    fake_logger.error.assert_called_with("database down")
    fake_logger.debug.assert_called_with("sectors=%s", 3)
    fake_logger.critical.assert_called_with("stop")


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built = []

    def _fake_build(self):
        built.append((self._subdir, self._prefix, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("app", "app_logs", True),
        ("usage", "usage_logs", False),
    ]
