import json
import logging

import pytest

from design_kata import logging_config


def test_session_id_generation():
    session_id = logging_config.generate_session_id()
    assert session_id.startswith("sess_")
    assert len(session_id) > 20


def test_session_id_round_trip():
    logging_config.set_session_id("sess_test")
    assert logging_config.get_session_id() == "sess_test"


def test_logging_setup_creates_log_dir_and_file(isolated_logging):
    logging_config.setup_logging(console_level="WARNING", file_level="DEBUG")
    logger = logging.getLogger("design_kata.test")
    logger.info("Test message")

    log_file = isolated_logging / "design-kata.log"
    assert log_file.exists()
    assert "Test message" in log_file.read_text(encoding="utf-8")


def test_session_id_is_stamped_on_records(isolated_logging):
    logging_config.setup_logging(console_level="ERROR")
    logging_config.set_session_id("sess_stamp")
    logging.getLogger("design_kata.test").warning("stamped")

    content = (isolated_logging / "design-kata.log").read_text(encoding="utf-8")
    assert "sess_stamp" in content


def test_json_format(isolated_logging):
    logging_config.setup_logging(console_level="ERROR", json_format=True)
    logging.getLogger("design_kata.test").info("structured %s", "message")

    lines = (isolated_logging / "design-kata.log").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]
    assert any(
        r["message"] == "structured message" and r["logger"] == "design_kata.test" for r in records
    )


def test_console_respects_level(isolated_logging, capsys):
    logging_config.setup_logging(console_level="WARNING")
    logger = logging.getLogger("design_kata.test")
    logger.info("quiet")
    logger.warning("loud")

    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err


def test_audit_log_does_not_reach_app_log(isolated_logging):
    logging_config.setup_logging(console_level="ERROR")
    logging_config.audit_log("Something audited", key="value")

    audit = (isolated_logging / "design-kata-audit.log").read_text(encoding="utf-8")
    app = (isolated_logging / "design-kata.log").read_text(encoding="utf-8")
    assert "Something audited | key=value" in audit
    assert "Something audited" not in app


def test_colored_formatter_leaves_record_untouched():
    formatter = logging_config.ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)

    output = formatter.format(record)

    assert "\033[31mERROR" in output
    assert record.levelname == "ERROR"


class ClosingTracker(logging.NullHandler):
    closed = False

    def close(self):
        self.closed = True
        super().close()


@pytest.fixture(scope="module")
def foreign_handler():
    """A root handler installed before any test in this module runs."""
    handler = ClosingTracker()
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    yield handler
    root_logger.removeHandler(handler)


def test_setup_logging_detaches_foreign_handlers_without_closing(foreign_handler):
    logging_config.setup_logging(console_level="ERROR")

    assert foreign_handler not in logging.getLogger().handlers
    assert foreign_handler.closed is False


def test_foreign_handlers_are_back_after_previous_setup(foreign_handler):
    # Runs after the test above, which detached the handler.
    assert foreign_handler in logging.getLogger().handlers
