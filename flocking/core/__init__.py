"""
Core module containing vector math, configuration, neighbor lookup and the flock.
"""

from .vector import Vector2
from .config import FlockConfig, ConfigurationError, DEFAULT_CONFIG, HEADLESS_CONFIG
from .neighbors import NeighborFinder, LinearScan, SpatialGrid
from .flock import Flock, AgentSnapshot

__all__ = [
    'Vector2',
    'FlockConfig',
    'ConfigurationError',
    'DEFAULT_CONFIG',
    'HEADLESS_CONFIG',
    'NeighborFinder',
    'LinearScan',
    'SpatialGrid',
    'Flock',
    'AgentSnapshot',
]
