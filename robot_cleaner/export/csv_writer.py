"""CSV export functionality for the robot cleaner simulation."""

import csv
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.grid import GridMap
    from ..model.state import StepRecord


class CSVWriter:
    """
    Exports robot steps to CSV format incrementally.

    Output format:
        step,event,x,y,cleaned_cells
        1,move,0,0,0
        2,clean,0,0,1
        ...
    """

    FIELDNAMES = ['step', 'event', 'x', 'y', 'cleaned_cells']

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.file: Optional[object] = None
        self.writer: Optional[csv.DictWriter] = None
        self._is_open = False

    def open(self) -> None:
        """Initialize file and write header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.FIELDNAMES)
        self.writer.writeheader()
        self._is_open = True

    def update(self, record: "StepRecord", grid: "GridMap") -> None:
        """Write one step record."""
        if not self._is_open:
            self.open()
        self.writer.writerow(record.to_csv_row())

    def close(self) -> None:
        """Close file handle."""
        if self.file:
            self.file.flush()
            self.file.close()
            self.file = None
            self.writer = None
            self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
