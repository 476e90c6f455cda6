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
"""Entry point for an interactive recording session."""
from typing import List

from pitchside.engine.events import MatchEvent
from pitchside.engine.recorder import MatchEventRecorder


def print_latest_event(events: List[MatchEvent]) -> None:
    """Print the newest event whenever the visible list changes.

    Parameters
    ----------
    events : List[MatchEvent]
        Visible events after the change.
    """
    if events:
        print(f"[{len(events):03d}] {events[-1].describe()}")
    else:
        print("[000] No events")


def main() -> None:
    """Open the capture window and print a session summary when it closes."""
    recorder = MatchEventRecorder(on_events_change=print_latest_event)

    try:
        from pitchside.visualizer.visualizer import pygame, start_visualizer

        if pygame is None:
            print("pygame is not installed; nothing to capture input from.")
            return
        print("R: pause/resume recording | 1/2/3: shot/pass/defensive | Ctrl+Z / Ctrl+Y: undo/redo | Q: quit")
        start_visualizer(recorder)
    except KeyboardInterrupt:
        print("\nRecording interrupted.")
    finally:
        recorder.close()

    summary = recorder.summary()
    print("\nSession Summary:")
    print(f"Shots: {summary.shots} (goals {summary.goals}, xG {summary.total_xg:.2f})")
    print(
        f"Passes: {summary.passes} (accuracy {summary.pass_accuracy:.1f}%, xA {summary.total_xa:.2f})"
    )
    print(f"Defensive actions: {summary.defensive_actions} ({summary.successful_defensive_actions} successful)")


if __name__ == "__main__":
    main()
