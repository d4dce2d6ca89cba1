"""
Logging configuration tests
"""

import logging

from shared.utils.logger import setup_logging, load_logging_config, get_audit_logger, DEFAULT_LOGGING_CONFIG


def test_shared_config_loaded():
    config = load_logging_config()
    assert "deadpoets" in config["loggers"]
    assert config["version"] == 1


def test_missing_file_falls_back(tmp_path):
    config = load_logging_config(str(tmp_path / "missing.yml"))
    assert "deadpoets" in config["loggers"]


def test_custom_file(tmp_path):
    path = tmp_path / "logging.yml"
    path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "handlers:\n"
        "  console:\n"
        "    class: logging.StreamHandler\n"
        "loggers:\n"
        "  custom:\n"
        "    level: WARNING\n"
        "    handlers: [console]\n"
    )

    config = setup_logging(str(path))

    assert "custom" in config["loggers"]
    assert logging.getLogger("custom").level == logging.WARNING


def test_level_override():
    config = setup_logging(log_level="debug")

    assert config["loggers"]["deadpoets"]["level"] == "DEBUG"
    assert logging.getLogger("deadpoets").level == logging.DEBUG


def test_environment_section_removed(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    config = setup_logging()
    assert "development" not in config
    assert config["loggers"]["deadpoets"]["level"] == "DEBUG"


def test_default_config_not_mutated(tmp_path, monkeypatch):
    monkeypatch.setattr("shared.utils.logger.SHARED_CONFIG_PATH", tmp_path / "none.yml")
    setup_logging(log_level="error")
    assert DEFAULT_LOGGING_CONFIG["loggers"]["deadpoets"]["level"] == "INFO"


def test_format_override():
    config = setup_logging(log_format="detailed")

    assert all(h["formatter"] == "detailed" for h in config["handlers"].values())


def test_unknown_format_ignored():
    config = setup_logging(log_format="fancy")

    assert all(h["formatter"] != "fancy" for h in config["handlers"].values())


def test_audit_logger(caplog):
    setup_logging(log_level="info")
    audit = logging.getLogger("deadpoets.audit")
    audit.addHandler(caplog.handler)
    try:
        get_audit_logger().log_user_action(None, "delete", "poem", 10)
        get_audit_logger().log_user_action(3, "delete", "report", 7, {"ip": "10.0.0.1"})
    finally:
        audit.removeHandler(caplog.handler)

    messages = [record.getMessage() for record in caplog.records]
    assert "User anonymous performed delete on poem 10" in messages
    assert "User 3 performed delete on report 7" in messages
    assert caplog.records[-1].details == {"ip": "10.0.0.1"}
