"""Tests for logging configuration, formatters and context propagation."""

import io
import json
import logging

import pytest

from addressbook.logging import ComponentLoggerAdapter, get_logger
from addressbook.logging.config import (
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from addressbook.logging.context import (
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(message="Search ran", **extra):
    return logging.getLogger("test").makeRecord(
        "test", logging.INFO, "test.py", 1, message, (), None, extra=extra or None
    )


class TestLogContext:
    """Tests for push/pop and the log_context manager."""

    def test_starts_empty(self):
        assert get_log_context() == {}

    def test_push_and_pop(self):
        token = push_log_context(command="find")
        assert get_log_context() == {"command": "find"}

        pop_log_context(token)
        assert get_log_context() == {}

    def test_nested_scopes(self):
        with log_context(command="find"):
            with log_context(keyword_count=2):
                assert get_log_context() == {"command": "find", "keyword_count": 2}
            assert get_log_context() == {"command": "find"}
        assert get_log_context() == {}

    def test_inner_scope_overrides_then_restores(self):
        with log_context(command="find"):
            with log_context(command="list"):
                assert get_log_context()["command"] == "list"
            assert get_log_context()["command"] == "find"

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with log_context(command="find"):
                raise RuntimeError("boom")

        assert get_log_context() == {}

    def test_returned_copy_is_detached(self):
        with log_context(command="find"):
            get_log_context()["command"] = "changed"
            assert get_log_context()["command"] == "find"


class TestFormatters:
    """Tests for JSONFormatter, KeyValueFormatter and ContextualFilter."""

    def test_json_mandatory_fields(self):
        log_obj = json.loads(JSONFormatter().format(make_record()))

        assert log_obj["level"] == "INFO"
        assert log_obj["message"] == "Search ran"
        assert log_obj["timestamp"].endswith("Z")
        assert len(log_obj["timestamp"]) == 24
        assert "name" not in log_obj

    def test_json_includes_extras(self):
        record = make_record(event="search.exact.matched", match_count=2, fallback=False)

        log_obj = json.loads(JSONFormatter().format(record))

        assert log_obj["event"] == "search.exact.matched"
        assert log_obj["match_count"] == 2
        assert log_obj["fallback"] is False

    def test_key_value_extras_sorted_and_quoted(self):
        formatter = KeyValueFormatter("[%(levelname)s] %(name)s: %(message)s")
        record = make_record(event="contacts.loaded", contacts_file="my contacts.yaml", ok=True)

        output = formatter.format(record)

        assert output.startswith("[INFO] test: Search ran ")
        assert output.endswith(
            'contacts_file="my contacts.yaml" event=contacts.loaded ok=true'
        )

    def test_filter_adds_static_and_context_fields(self):
        log_filter = ContextualFilter(service="addressbook", environment="test")

        with log_context(command="find", keyword_count=1):
            record = make_record()
            assert log_filter.filter(record) is True

        assert record.service == "addressbook"
        assert record.environment == "test"
        assert record.command == "find"
        assert record.keyword_count == 1

    def test_filter_does_not_override_explicit_extra(self):
        with log_context(command="find"):
            record = make_record(command="explicit")
            ContextualFilter().filter(record)

        assert record.command == "explicit"

    def test_key_value_omits_service_and_environment(self):
        formatter = KeyValueFormatter("%(message)s")
        record = make_record()
        ContextualFilter(environment="test").filter(record)

        assert formatter.format(record) == "Search ran"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="LOUD")

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid log format"):
            configure_logging(format_type="xml")

    def test_json_end_to_end(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging(level="INFO", format_type="json", environment="test", stream=stream)

        with log_context(command="find"):
            get_logger("addressbook.test", component="search").info(
                "Exact name search found 1 contact(s)", extra={"event": "search.exact.matched"}
            )

        log_obj = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert log_obj["event"] == "search.exact.matched"
        assert log_obj["component"] == "search"
        assert log_obj["command"] == "find"
        assert log_obj["service"] == "addressbook"
        assert log_obj["environment"] == "test"

    def test_single_handler_installed(self, restore_root_logger):
        configure_logging(level="DEBUG", format_type="key-value", stream=io.StringIO())
        configure_logging(level="DEBUG", format_type="key-value", stream=io.StringIO())

        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, KeyValueFormatter)
        assert restore_root_logger.level == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger()."""

    def test_plain_logger_without_component(self):
        assert isinstance(get_logger("addressbook.x"), logging.Logger)

    def test_adapter_merges_component(self):
        adapter = get_logger("addressbook.x", component="cli")

        assert isinstance(adapter, ComponentLoggerAdapter)
        _, kwargs = adapter.process("msg", {"extra": {"event": "cli.error"}})
        assert kwargs["extra"] == {"component": "cli", "event": "cli.error"}
