"""
Grouped-color boids flocking simulation.
"""

from .core import Flock, FlockConfig, Vector2, ConfigurationError

__all__ = ['Flock', 'FlockConfig', 'Vector2', 'ConfigurationError']
