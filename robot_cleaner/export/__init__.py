"""I/O package for the robot cleaner simulation."""

from .console import ConsoleRenderer
from .csv_writer import CSVWriter
from .visualizer import Visualizer
from .reporter import Reporter

__all__ = ['ConsoleRenderer', 'CSVWriter', 'Visualizer', 'Reporter']
