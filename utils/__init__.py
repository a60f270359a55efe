"""
Utility functions for the simulator
"""

from .helpers import clamp, ns_to_seconds

__all__ = ['clamp', 'ns_to_seconds']
