# tests/test_logging_config.py
import json
import logging

import pytest

from src.config import Settings
from src.logging_config import JSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_installs_json_formatter():
    configure_logging(Settings(log_format="json", log_level="warning"))

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert root.level == logging.WARNING


def test_json_formatter_carries_context_fields():
    record = logging.LogRecord("src.services", logging.INFO, __file__, 10, "assigned %s", ("MEMBER",), None)
    record.project_id = 3

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "assigned MEMBER"
    assert payload["project_id"] == 3
    assert "user_id" not in payload


def test_repeated_configuration_does_not_stack_handlers():
    configure_logging(Settings())
    configure_logging(Settings())
    assert len(logging.getLogger().handlers) == 1
