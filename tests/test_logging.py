"""Tests for logging infrastructure."""
import logging
import tempfile
from pathlib import Path

import pytest

from duty_rota.utils.logging_setup import (
    TRACE,
    GenerationLogger,
    get_logger,
    log_constraint,
    log_function_call,
    setup_logging,
)


class TestLoggingSetup:
    """Tests for logging configuration."""

    def test_setup_logging_creates_logger(self):
        """Test that setup_logging returns a logger."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            logger = setup_logging(level="DEBUG", log_file=str(log_file))

            assert logger.name == "duty_rota"
            assert len(logger.handlers) == 2  # Console + file

    def test_setup_logging_creates_log_file(self):
        """Test that log file and its directory are created."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "logs" / "test.log"
            logger = setup_logging(level="DEBUG", log_file=str(log_file))
            logger.info("Test message")

            assert log_file.exists()

    def test_setup_logging_no_file(self):
        logger = setup_logging(level="INFO", log_file=None)
        assert len(logger.handlers) == 1  # Console only

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(level="INFO", log_file=None)
        logger = setup_logging(level="INFO", log_file=None)
        assert len(logger.handlers) == 1

    def test_trace_level_name(self):
        setup_logging(level="TRACE", log_file=None)
        assert TRACE == 5
        assert logging.getLevelName(TRACE) == "TRACE"
        assert logging.getLogger("duty_rota").handlers[0].level == TRACE

    def test_get_logger(self):
        assert get_logger("duty_rota.engine.assigner").name == "duty_rota.engine.assigner"


class TestLogFunctionCall:
    """Tests for function call decorator."""

    def test_decorator_logs_entry_exit(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(TRACE):
            result = add(1, 2)

        assert result == 3
        assert "add" in caplog.text

    def test_decorator_logs_exceptions(self, caplog):
        @log_function_call
        def fail():
            raise ValueError("test error")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                fail()
        assert "test error" in caplog.text

    def test_decorator_preserves_function_name(self):
        @log_function_call
        def my_function():
            """Docstring."""

        assert my_function.__name__ == "my_function"
        assert my_function.__doc__ == "Docstring."


class TestLogConstraint:
    """Tests for constraint logging."""

    def test_log_constraint_satisfied(self, caplog):
        logger = logging.getLogger("test")

        with caplog.at_level(logging.DEBUG):
            log_constraint(logger, "no-repeat", True, "2024-04-02")

        assert "✓" in caplog.text
        assert "no-repeat" in caplog.text

    def test_log_constraint_violated_is_warning(self, caplog):
        logger = logging.getLogger("test")

        with caplog.at_level(logging.WARNING):
            log_constraint(logger, "no-repeat", False, "2024-04-02 relaxed for Alice")

        assert "✗" in caplog.text
        assert caplog.records[0].levelno == logging.WARNING


class TestGenerationLogger:
    """Tests for GenerationLogger class."""

    def test_phase_logging(self, caplog):
        glog = GenerationLogger("test.generation")

        with caplog.at_level(logging.INFO):
            glog.phase("Primary pass")

        assert "Primary pass" in caplog.text
        assert "=" in caplog.text

    def test_step_logging(self, caplog):
        glog = GenerationLogger("test.generation")

        with caplog.at_level(logging.DEBUG):
            glog.step("2024-04-01: no available employee")

        assert "▸" in caplog.text

    def test_nested_context(self, caplog):
        glog = GenerationLogger("test.generation")

        with caplog.at_level(TRACE):
            glog.enter("April")
            glog.detail("order", ["Alice", "Bob"])
            glog.exit("April done")

        assert "┌─" in caplog.text
        assert "└─" in caplog.text
        assert glog.indent == 0


class TestLogRotation:
    """Tests for log file rotation."""

    def test_rotation_on_size(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "test.log"
            logger = setup_logging(
                level="DEBUG",
                log_file=str(log_file),
                max_bytes=1000,
                backup_count=2,
            )

            for i in range(100):
                logger.info(f"Message {i}: " + "x" * 50)

            assert log_file.exists()
            assert list(Path(tmpdir).glob("test.log.*"))
