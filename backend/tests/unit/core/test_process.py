"""
Tests for process-level failure handling.

WHY: Failures that escape every request handler must be logged and end the
process with status 1. Termination is patched out so the test run survives.
"""

import asyncio
import logging
import sys

import pytest

from cybershield.core import process


@pytest.fixture
def terminations(monkeypatch):
    calls = []
    monkeypatch.setattr(process, "_terminate", lambda: calls.append(process.EXIT_FAILURE))
    return calls


class TestUncaughtExceptionHook:

    def test_logs_and_terminates(self, terminations, caplog):
        exc = RuntimeError("startup failed")

        with caplog.at_level(logging.CRITICAL, logger="cybershield.core.process"):
            process.handle_uncaught_exception(RuntimeError, exc, None)

        assert terminations == [1]
        assert "Uncaught Exception" in caplog.text

    def test_keyboard_interrupt_is_not_fatal(self, terminations, monkeypatch):
        seen = []
        monkeypatch.setattr(sys, "__excepthook__", lambda *args: seen.append(args[0]))

        process.handle_uncaught_exception(KeyboardInterrupt, KeyboardInterrupt(), None)

        assert terminations == []
        assert seen == [KeyboardInterrupt]

    def test_install_sets_excepthook(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
        process.install_process_handlers()
        assert sys.excepthook is process.handle_uncaught_exception


class TestLoopExceptionHandler:

    def test_logs_exception_and_terminates(self, terminations, caplog):
        loop = asyncio.new_event_loop()
        try:
            with caplog.at_level(logging.CRITICAL, logger="cybershield.core.process"):
                process.handle_loop_exception(
                    loop,
                    {"message": "Task exception was never retrieved", "exception": ValueError("x")},
                )
        finally:
            loop.close()

        assert terminations == [1]
        assert "Unhandled Rejection" in caplog.text
        assert "Task exception was never retrieved" in caplog.text

    def test_message_without_exception(self, terminations):
        loop = asyncio.new_event_loop()
        try:
            process.handle_loop_exception(loop, {"message": "socket error"})
        finally:
            loop.close()

        assert terminations == [1]

    @pytest.mark.asyncio
    async def test_install_loop_handler(self):
        loop = asyncio.get_running_loop()
        previous = loop.get_exception_handler()
        try:
            process.install_loop_handler()
            assert loop.get_exception_handler() is process.handle_loop_exception
        finally:
            loop.set_exception_handler(previous)
