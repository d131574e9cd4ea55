"""Summary report generation for the robot cleaner simulation."""

from typing import Optional, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from ..model.grid import GridMap
    from ..model.state import SimulationState, StepRecord


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, config_path: Optional[str]):
        self.config_path = config_path
        self.move_events = 0
        self.clean_events = 0
        self.redundant_cleans = 0
        self._last_cleaned = 0

    def update(self, record: "StepRecord", grid: "GridMap") -> None:
        """Accumulate counts per step."""
        if record.event == "move":
            self.move_events += 1
        else:
            self.clean_events += 1
            # Clean on an already cleaned cell leaves the count unchanged
            if record.cleaned_cells == self._last_cleaned:
                self.redundant_cleans += 1
        self._last_cleaned = record.cleaned_cells

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        attempted = int(metrics.get('moves_attempted', 0))
        succeeded = int(metrics.get('moves_succeeded', 0))
        cleaned = int(metrics.get('cleaned_cells', 0))
        free = int(metrics.get('free_cells', 0))
        initial_dirt = int(metrics.get('initial_dirt', 0))
        dirt_left = int(metrics.get('dirt_remaining', 0))
        coverage_pct = metrics.get('coverage', 0.0) * 100

        lines = [
            "",
            "=" * 80,
            "                    ROBOT CLEANER SIMULATION REPORT",
            "=" * 80,
            f"Configuration: {self.config_path or '(built-in map)'}",
            f"Strategy:      {final_state.strategy}",
            f"Outcome:       {final_state.outcome}",
            "",
            "RUN METRICS",
            "-" * 40,
            f"Move Attempts:         {attempted}",
            f"Successful Moves:      {succeeded}",
            f"Blocked Moves:         {attempted - succeeded}",
            f"Step Events:           {self.move_events + self.clean_events} ({self.move_events} moves)",
            f"Clean Actions:         {self.clean_events} ({self.redundant_cleans} redundant)",
            f"Cells Cleaned:         {cleaned} / {free} ({coverage_pct:.1f}%)",
            f"Dirt Cleared:          {initial_dirt - dirt_left} / {initial_dirt}",
            f"Final Position:        ({final_state.robot_x}, {final_state.robot_y})",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'cleaning_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'cleaning.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
