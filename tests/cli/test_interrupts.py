"""Unit tests for interrupt tracking in the directree CLI."""

import os
import signal
import sys
from unittest.mock import patch

import pytest

from directree.cli import interrupts
from directree.cli.interrupts import SIGINT_EXIT_CODE, SIGPIPE_EXIT_CODE, InterruptMonitor, interrupt_monitor

requires_sigpipe = pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE is not available")


@pytest.fixture
def monitor():
    """A monitor of its own, so the application-wide one is never touched."""
    return InterruptMonitor()


@pytest.fixture
def restore_handlers():
    """Put back whatever signal handlers were active before the test."""
    saved = {signum: signal.getsignal(signum) for signum in InterruptMonitor().watched_signals()}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_new_monitor_is_quiet(monitor):
    assert not monitor.interrupted()
    assert monitor.exit_code() is None


def test_watched_signals(monitor):
    watched = monitor.watched_signals()
    assert watched[signal.SIGINT] is monitor.sigint_received
    if hasattr(signal, "SIGPIPE"):
        assert watched[signal.SIGPIPE] is monitor.sigpipe_received
    else:
        assert len(watched) == 1


def test_watched_signals_without_sigpipe(monitor):
    with patch.object(interrupts, "signal") as mock_signal:
        del mock_signal.SIGPIPE
        mock_signal.SIGINT = signal.SIGINT
        assert list(monitor.watched_signals()) == [signal.SIGINT]


def test_install_routes_signals_to_monitor(monitor, restore_handlers):
    monitor.install()

    for signum in monitor.watched_signals():
        assert signal.getsignal(signum) == monitor.record


def test_sigint_is_recorded_then_handed_back(monitor, restore_handlers):
    before = signal.getsignal(signal.SIGINT)
    monitor.install()

    signal.raise_signal(signal.SIGINT)

    assert monitor.sigint_received.is_set()
    assert monitor.interrupted()
    assert monitor.exit_code() == SIGINT_EXIT_CODE == 130
    assert signal.getsignal(signal.SIGINT) == before


@requires_sigpipe
def test_sigpipe_is_recorded(monitor, restore_handlers):
    monitor.install()

    signal.raise_signal(signal.SIGPIPE)

    assert monitor.sigpipe_received.is_set()
    assert monitor.exit_code() == SIGPIPE_EXIT_CODE == 141


def test_record_without_install_keeps_handlers(monitor, restore_handlers):
    before = signal.getsignal(signal.SIGINT)

    monitor.record(signal.SIGINT, None)

    assert monitor.sigint_received.is_set()
    assert signal.getsignal(signal.SIGINT) == before


def test_sigpipe_exit_code_wins(monitor):
    monitor.sigint_received.set()
    monitor.sigpipe_received.set()
    assert monitor.exit_code() == SIGPIPE_EXIT_CODE


def test_silence_stdout_only_after_interrupt(monitor):
    with patch("directree.cli.interrupts.os", autospec=True) as mock_os:
        mock_os.open.return_value = 123
        mock_os.devnull = os.devnull
        mock_os.O_WRONLY = os.O_WRONLY

        monitor.silence_stdout()
        mock_os.dup2.assert_not_called()

        monitor.sigint_received.set()
        with patch.object(sys, "stdout") as mock_stdout:
            mock_stdout.fileno.return_value = 1
            monitor.silence_stdout()

    mock_os.open.assert_called_once_with(os.devnull, os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)


def test_application_monitor():
    assert isinstance(interrupt_monitor, InterruptMonitor)
