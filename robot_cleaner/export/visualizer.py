"""Visualization and export for the robot cleaner simulation."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from pathlib import Path
from typing import List, Sequence, Tuple, TYPE_CHECKING
from PIL import Image
import io

from ..model.grid import CellType

if TYPE_CHECKING:
    from ..model.grid import GridMap
    from ..model.state import SimulationState, StepRecord


class Visualizer:
    """
    Generates visual outputs using matplotlib.

    Supports:
    - Single PNG snapshots with the robot path overlaid
    - Animated GIF compilation from buffered steps
    """

    # Color scheme
    COLORS = {
        'empty': '#ECF0F1',     # Light gray
        'dirt': '#8E6E53',      # Brown
        'obstacle': '#2C3E50',  # Dark blue-gray
        'cleaned': '#A9DFBF',   # Pale green
        'robot': '#E74C3C',     # Red
        'path': '#3498DB',      # Blue
    }

    def __init__(self, grid_width: int, grid_height: int, frame_every: int = 5):
        self.width = grid_width
        self.height = grid_height
        self.frame_every = max(1, frame_every)
        self.frames: List[Image.Image] = []

    def _cells_to_rgb(self, cells: np.ndarray) -> np.ndarray:
        base = np.ones((self.height, self.width, 3))
        base[:, :] = to_rgb(self.COLORS['empty'])
        base[cells == CellType.DIRT] = to_rgb(self.COLORS['dirt'])
        base[cells == CellType.OBSTACLE] = to_rgb(self.COLORS['obstacle'])
        base[cells == CellType.CLEANED] = to_rgb(self.COLORS['cleaned'])
        return base

    def _create_figure(self, cells: np.ndarray,
                       robot: Tuple[int, int],
                       path: Sequence[Tuple[int, int]],
                       title: str) -> plt.Figure:
        """Create matplotlib figure for a grid state."""
        # Determine figure size based on grid aspect ratio
        aspect = self.width / self.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # y grows downward, so keep the image origin at the top
        ax.imshow(self._cells_to_rgb(cells), origin='upper', aspect='equal',
                  extent=[-0.5, self.width - 0.5, self.height - 0.5, -0.5])

        if len(path) > 1:
            xs = [p[0] for p in path]
            ys = [p[1] for p in path]
            ax.plot(xs, ys, '-', color=self.COLORS['path'],
                    linewidth=1.0, alpha=0.6)

        ax.plot(robot[0], robot[1], 'o', color=self.COLORS['robot'],
                markersize=8, markeredgecolor='white', markeredgewidth=0.5)

        ax.set_title(title)
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.set_xlim(-0.5, self.width - 0.5)
        ax.set_ylim(self.height - 0.5, -0.5)

        legend_elements = [
            plt.Line2D([0], [0], marker='s', color='w', label='Dirt',
                       markerfacecolor=self.COLORS['dirt'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Obstacle',
                       markerfacecolor=self.COLORS['obstacle'], markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Cleaned',
                       markerfacecolor=self.COLORS['cleaned'], markersize=8),
            plt.Line2D([0], [0], marker='o', color='w', label='Robot',
                       markerfacecolor=self.COLORS['robot'], markersize=8),
        ]
        ax.legend(handles=legend_elements, loc='upper left',
                  bbox_to_anchor=(1.01, 1.0), fontsize=8)

        plt.tight_layout()
        return fig

    def update(self, record: "StepRecord", grid: "GridMap") -> None:
        """Buffer a GIF frame every ``frame_every`` steps."""
        if record.step % self.frame_every == 0:
            self.buffer_frame(grid.copy_cells(), (record.x, record.y),
                              f'Step {record.step} | Cleaned: {record.cleaned_cells}')

    def buffer_frame(self, cells: np.ndarray, robot: Tuple[int, int],
                     title: str = '') -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(cells, robot, [], title)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of the final state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        coverage = state.metrics.get('coverage', 0.0) * 100
        title = (f'{state.strategy.capitalize()} | {state.outcome} | '
                 f'Coverage: {coverage:.1f}%')
        fig = self._create_figure(state.cells, (state.robot_x, state.robot_y),
                                  state.path, title)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 10) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

    def clear_frames(self) -> None:
        """Clear buffered frames."""
        self.frames.clear()
