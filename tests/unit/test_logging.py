"""
Tests for fsadmin.core.logging module.
"""

from unittest.mock import Mock

import pytest

from fsadmin.core.logging import OperationLogger


class TestOperationLogger:
    """Tests for OperationLogger."""

    def test_logs_completion(self) -> None:
        logger = Mock()

        with OperationLogger("resize2fs", logger, device="/dev/sda1") as op:
            op.update(extra=1)

        logger.debug.assert_called_once()
        logger.info.assert_called_once()
        kwargs = logger.info.call_args.kwargs
        assert kwargs["operation"] == "resize2fs"
        assert kwargs["device"] == "/dev/sda1"
        assert kwargs["extra"] == 1
        assert "duration_seconds" in kwargs

    def test_logs_failure_and_reraises(self) -> None:
        logger = Mock()

        with pytest.raises(RuntimeError):
            with OperationLogger("e2fsck_f", logger, device="/dev/sda1"):
                raise RuntimeError("boom")

        logger.error.assert_called_once()
        kwargs = logger.error.call_args.kwargs
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error"] == "boom"
        logger.info.assert_not_called()
