"""
Simulation World

Static course layouts and the flat, ordered panel list a display layer
draws from.
"""

from .geometry import Pose
from .panel import Panel, SolidColor
from .vehicle_sim import Vehicle


class Map:
    """
    Named static layout plus a factory for the car that drives on it.

    Subclasses fill in `name`, `start_pose` and `_build_panels()`. The panel
    tuple is built once and never changes afterwards.
    """

    name = 'Map'
    start_pose = Pose()

    def __init__(self):
        self._panels = tuple(self._build_panels())

    def _build_panels(self):
        raise NotImplementedError

    def static_panels(self):
        """World-fixed panels in draw order (background first)."""
        return self._panels

    def spawn_vehicle(self, **kwargs):
        """Fresh car at this layout's starting pose with straight wheels."""
        return Vehicle(self.start_pose, **kwargs)

    def __repr__(self):
        return f"{type(self).__name__}(panels={len(self._panels)})"


def block(name, x, y, width, height, color, heading=0.0):
    """World-fixed solid panel centred at (x, y)."""
    return Panel(width, height, SolidColor(color), Pose.from_xy_theta(x, y, heading), name)


def scene_panels(world_map):
    """(Panel, world pose) pairs for the map's static layout."""
    return [(panel, panel.offset) for panel in world_map.static_panels()]


def vehicle_panels(vehicle):
    """(Panel, world pose) pairs for the car's parts."""
    return vehicle.panels()


def draw_list(world_map, vehicle=None):
    """Everything to draw this frame: the static layout, then the car on top."""
    items = scene_panels(world_map)
    if vehicle is not None:
        items.extend(vehicle_panels(vehicle))
    return items
