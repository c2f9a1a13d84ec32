import logging

import pytest

from saintluc.logging.logger import Log


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("saintluc").level == logging.DEBUG
        Log.configure("WARNING")

    def test_configure_does_not_duplicate_handlers(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(logging.getLogger("saintluc").handlers) == 1
        Log.configure("WARNING")

    def test_messages_reach_saintluc_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="saintluc"):
            Log.info("score computed")
            Log.warning("submission rejected")
        assert [r.getMessage() for r in caplog.records] == [
            "score computed",
            "submission rejected",
        ]
