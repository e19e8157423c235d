"""
Simulation module containing the interactive window and headless runs.
"""

from .interactive import Simulation
from .headless import HeadlessRun

__all__ = ['Simulation', 'HeadlessRun']
