# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Structured logging utilities used to trace recording sessions."""
import time
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Deque, List, Optional, TextIO, Tuple

from pitchside.engine.config import ENGINE_CONFIG


@dataclass
class DebugEvent:
    """Immutable record representing a single logged event.

    Parameters
    ----------
    timestamp : float
        Wall-clock time (seconds since the epoch) when the entry was recorded.
    event_type : str
        Category label describing the entry, for example ``"CAPTURE"``.
    details : str
        Human-readable description providing additional context.
    """

    timestamp: float
    event_type: str
    details: str


class RecorderDebugger:
    """Helper object that streams structured recorder telemetry to disk.

    Parameters
    ----------
    output_dir : str | None, optional
        Directory where session logs are created; defaults to
        ``ENGINE_CONFIG.logging.output_dir`` and is created when missing.
    recent_buffer : int | None, optional
        Number of recent entries retained in memory for live displays.
    """

    def __init__(self, output_dir: Optional[str] = None, recent_buffer: Optional[int] = None) -> None:
        cfg = ENGINE_CONFIG.logging
        self.output_dir = Path(output_dir if output_dir is not None else cfg.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.session_start = time.strftime("%Y%m%d_%H%M%S")
        self._lock = Lock()
        self._line_number = 1
        self._recent_events: Deque[Tuple[int, DebugEvent]] = deque(
            maxlen=recent_buffer if recent_buffer is not None else cfg.recent_buffer
        )
        self.start_new_session()

    def start_new_session(self) -> None:
        """Start a new debug logging session."""
        if self.log_file:
            self.log_file.close()

        self.log_path = self.output_dir / f"recorder_debug_{self.session_start}.txt"
        self.log_file = open(self.log_path, "w", encoding="utf-8")
        self.log_file.write(f"=== Recorder Debug Session: {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")

    def log_capture(self, description: str, event_count: int) -> None:
        """Log a committed event.

        Parameters
        ----------
        description : str
            Human-readable label of the new event.
        event_count : int
            Number of events visible after the commit.
        """
        self._write_log("CAPTURE", f"{description} | Events: {event_count}")

    def log_pass_start(self, x: float, y: float) -> None:
        """Log the first click of a pass.

        Parameters
        ----------
        x : float
            Horizontal pitch coordinate of the start point.
        y : float
            Vertical pitch coordinate of the start point.
        """
        self._write_log("PASS_START", f"Start: ({x:.1f}, {y:.1f}) | Awaiting end point")

    def log_history(self, action: str, index: int, length: int, event_count: int) -> None:
        """Log a history movement or edit.

        Parameters
        ----------
        action : str
            Name of the operation, for example ``"undo"`` or ``"delete"``.
        index : int
            History index after the operation.
        length : int
            Number of stored snapshots after the operation.
        event_count : int
            Number of visible events after the operation.
        """
        self._write_log("HISTORY", f"Action: {action} | Index: {index}/{length - 1} | Events: {event_count}")

    def log_recording(self, enabled: bool) -> None:
        """Log a change of the recording flag.

        Parameters
        ----------
        enabled : bool
            New value of the flag.
        """
        self._write_log("RECORDING", "Started" if enabled else "Stopped")

    def log_ignored(self, reason: str) -> None:
        """Log input that produced no state change.

        Parameters
        ----------
        reason : str
            Short explanation, for example ``"recording disabled"``.
        """
        self._write_log("IGNORED", reason)

    def log_error(self, error_type: str, description: str) -> None:
        """Log an error or warning.

        Parameters
        ----------
        error_type : str
            Label describing the error classification.
        description : str
            Human-readable explanation of the issue.
        """
        self._write_log("ERROR", f"Type: {error_type} | Details: {description}")

    def _write_log(self, event_type: str, details: str) -> None:
        """Write a log entry to the file.

        Parameters
        ----------
        event_type : str
            Category label for the log entry.
        details : str
            Formatted message body to persist.
        """
        entry = DebugEvent(time.time(), event_type, details)
        timestamp = time.strftime("%H:%M:%S", time.localtime(entry.timestamp))
        log_line = f"[{timestamp}] {event_type}: {details}"

        with self._lock:
            line_no = self._line_number
            self._line_number += 1
            self._recent_events.append((line_no, entry))

            if self.log_file:
                self.log_file.write(f"{log_line}\n")
                self.log_file.flush()

    def get_recent_events(self, limit: int = 20) -> List[DebugEvent]:
        """Return the latest entries, oldest first.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[DebugEvent]
            Up to ``limit`` most recent entries.
        """
        with self._lock:
            selected = list(self._recent_events)[-limit:]
        return [entry for _, entry in selected]

    def get_recent_lines(self, limit: int = 20) -> List[str]:
        """Return the latest entries formatted with line numbers for live displays.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[str]
            Up to ``limit`` most recent log lines with prefixed line numbers.
        """
        with self._lock:
            selected = list(self._recent_events)[-limit:]
        return [f"{line_no:05d} {entry.event_type}: {entry.details}" for line_no, entry in selected]

    def close(self) -> None:
        """Close the log file."""
        if self.log_file:
            self.log_file.close()
            self.log_file = None
