"""Interrupt tracking for the directree CLI.

The tree is streamed to stdout one line at a time, and every write first asks the
InterruptMonitor whether SIGPIPE or SIGINT has arrived. Once one has, the walk
stops at the next line, the clipboard and output file are skipped, and the
process exits with the status conventionally used for that signal.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

SIGINT_EXIT_CODE = 130
SIGPIPE_EXIT_CODE = 141


class InterruptMonitor:
    """Records interrupting signals for the rendering loop to act on.

    Each signal is handled once: recording it puts the handler that was active
    before install() back in place, so a second Ctrl+C behaves as it normally would.

    Attributes:
        sigpipe_received: Set once SIGPIPE has arrived (never set where the platform lacks SIGPIPE).
        sigint_received: Set once SIGINT has arrived.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._previous_handlers: Dict[int, Any] = {}

    def watched_signals(self) -> Dict[int, Event]:
        """Map each signal available on this platform to the event recording it."""
        watched = {signal.SIGINT: self.sigint_received}
        if hasattr(signal, "SIGPIPE"):
            watched[signal.SIGPIPE] = self.sigpipe_received
        return watched

    def install(self) -> None:
        """Route the watched signals to this monitor."""
        for signum in self.watched_signals():
            self._previous_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, self.record)

    def record(self, signum: int, frame: Optional[FrameType]) -> None:
        """Signal handler: mark the signal as received and hand it back to the previous handler."""
        self.watched_signals()[signum].set()
        previous = self._previous_handlers.pop(signum, None)
        if previous is not None:
            signal.signal(signum, previous)

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Return the exit status owed to a received signal, or None if none arrived.

        SIGPIPE wins over SIGINT: once the reader has gone there is nobody left to report to.
        """
        if self.sigpipe_received.is_set():
            return SIGPIPE_EXIT_CODE
        if self.sigint_received.is_set():
            return SIGINT_EXIT_CODE
        return None

    def silence_stdout(self) -> None:
        """Point stdout at the null device after an interrupt.

        Registered with atexit so interpreter shutdown does not complain about
        flushing into a closed pipe.
        """
        if self.interrupted():
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())


interrupt_monitor = InterruptMonitor()
atexit.register(interrupt_monitor.silence_stdout)
