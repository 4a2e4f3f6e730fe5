"""
Unit Tests for ConsoleAuditLogger.

Test Aspects Covered:
    ✅ Business Logic: Message format, verbosity
"""

from __future__ import annotations

from fundamental_screener.adapters.console_logger import ConsoleAuditLogger
from fundamental_screener.interfaces import AuditLogger
from tests.fixtures.fakes import make_candidate, make_record


class TestConsoleAuditLogger:
    """Test cases for ConsoleAuditLogger."""

    def test_implements_protocol(self, console_logger: ConsoleAuditLogger) -> None:
        assert isinstance(console_logger, AuditLogger)

    def test_run_summary(self, capsys) -> None:
        """
        SCENARIO: Start and end of a run
        EXPECTED: Two lines tagged with the correlation id prefix
        """
        # Arrange
        logger = ConsoleAuditLogger(verbose=False)
        logger.set_correlation_id("abcdef123456")

        # Act
        logger.log_run_start(12, 12)
        logger.log_run_end(3, 0.5, {"passed": 3, "rejected": 9})

        # Assert
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert "[abcdef12]" in lines[0]
        assert "Screening 12 candidates with 12 workers" in lines[0]
        assert "Selected 3 stocks (0.500s) passed=3, rejected=9" in lines[1]

    def test_rejections_only_when_verbose(self, capsys) -> None:
        # Arrange
        record = make_record(make_candidate("600519.SH", name="Kweichow Moutai"))
        quiet = ConsoleAuditLogger(verbose=False)
        loud = ConsoleAuditLogger(verbose=True)

        # Act
        quiet.log_candidate_rejected(record, ["a"])
        loud.log_candidate_rejected(record, ["a", "b"])

        # Assert
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert "Kweichow Moutai 600519.SH has some defects: a; b" in lines[0]

    def test_failures_always_logged(self, capsys, console_logger: ConsoleAuditLogger) -> None:
        # Act
        console_logger.log_candidate_failed(
            make_candidate("000858.SZ", name="Wuliangye Yibin"), "build_record", "timeout"
        )

        # Assert
        out = capsys.readouterr().out
        assert "[ERROR]" in out
        assert "[--------]" in out
        assert "Wuliangye Yibin 000858.SZ failed in build_record: timeout" in out
