"""
Car Simulation Module

Kinematic car model and panel-based scenes. The pygame display lives in
simulation.visualization.
"""

from .geometry import (
    Point, RotationMatrix, Pose,
    compose, rotate, translate, world_pose
)
from .panel import Panel, SolidColor, ImageAsset
from .vehicle_sim import Vehicle, InvalidMotion
from .world import Map, scene_panels, vehicle_panels, draw_list
from .scenarios import ParallelParking, RightAngleTurn, get_map, available_maps

__all__ = [
    'Point', 'RotationMatrix', 'Pose',
    'compose', 'rotate', 'translate', 'world_pose',
    'Panel', 'SolidColor', 'ImageAsset',
    'Vehicle', 'InvalidMotion',
    'Map', 'scene_panels', 'vehicle_panels', 'draw_list',
    'ParallelParking', 'RightAngleTurn', 'get_map', 'available_maps'
]
