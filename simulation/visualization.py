"""
Visualization Module

2D pygame rendering of a course and the car driving on it.
"""

import math
import pygame

from .panel import ImageAsset, SolidColor
from .world import draw_list
from driving.controller import (
    FORWARD, KEY_DOWN, KEY_UP, REVERSE, STEER_LEFT, STEER_RIGHT
)
import config

KEY_ACTIONS = {
    pygame.K_UP: FORWARD,
    pygame.K_DOWN: REVERSE,
    pygame.K_LEFT: STEER_LEFT,
    pygame.K_RIGHT: STEER_RIGHT,
}

MAP_KEYS = {
    pygame.K_1: 'parallel',
    pygame.K_2: 'turn',
}


class AssetCache:
    """
    Decoded images keyed by the asset's content key, so panels sharing an
    image share one surface.
    """

    def __init__(self):
        self._surfaces = {}

    def resolve(self, asset):
        surface = self._surfaces.get(asset.key)
        if surface is None:
            width, height = asset.size
            expected = width * height * 3
            if len(asset.pixels) != expected:
                raise ValueError(
                    f"Image '{asset.key}' has {len(asset.pixels)} bytes, "
                    f"expected {expected} for {width}x{height} RGB")
            surface = pygame.image.frombytes(asset.pixels, (width, height), 'RGB')
            self._surfaces[asset.key] = surface
        return surface

    def __contains__(self, key):
        return key in self._surfaces

    def __len__(self):
        return len(self._surfaces)

    def clear(self):
        self._surfaces.clear()


class SimulationDisplay:
    """
    Top-down view: world origin at the bottom-left corner, y pointing up.
    """

    def __init__(self, width=config.WINDOW_WIDTH, height=config.WINDOW_HEIGHT,
                 scale=config.SCALE, title=config.WINDOW_TITLE):
        pygame.init()
        pygame.font.init()

        self.width = width
        self.height = height
        self.scale = scale
        self.display = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        self.font = pygame.font.SysFont('monospace', 14)
        self.assets = AssetCache()
        self.clock = pygame.time.Clock()

    def update(self, world_map, vehicle):
        """Render one frame."""
        self.display.fill((0, 0, 0))

        for panel, pose in draw_list(world_map, vehicle):
            self._draw_panel(panel, pose)

        self._draw_status(world_map, vehicle)
        pygame.display.flip()

    def world_to_screen(self, point):
        """Convert world coordinates to screen coordinates."""
        return point.x * self.scale, self.height - point.y * self.scale

    def _draw_panel(self, panel, pose):
        visual = panel.visual
        if isinstance(visual, SolidColor):
            points = [self.world_to_screen(p) for p in panel.outline_world(pose)]
            pygame.draw.polygon(self.display, visual.rgb, points)
        elif isinstance(visual, ImageAsset):
            image = self.assets.resolve(visual)
            size = (max(1, round(panel.width * self.scale)),
                    max(1, round(panel.height * self.scale)))
            # Screen y is flipped, so a counter-clockwise world heading is
            # also counter-clockwise on screen
            sprite = pygame.transform.rotate(pygame.transform.scale(image, size),
                                             math.degrees(pose.heading))
            rect = sprite.get_rect(center=self.world_to_screen(pose.origin))
            self.display.blit(sprite, rect)
        else:
            raise TypeError(f"Unsupported panel visual: {type(visual).__name__}")

    def _draw_status(self, world_map, vehicle):
        status = vehicle.get_status()
        lines = [
            world_map.name,
            f"pos   ({status['x']:.2f}, {status['y']:.2f})",
            f"head  {status['heading_deg']:.1f} deg",
            f"steer {status['steer_deg']:.1f} deg",
        ]
        y = 8
        for line in lines:
            text = self.font.render(line, True, (255, 255, 255))
            self.display.blit(text, (8, y))
            y += 16

    def handle_events(self):
        """
        Handle pygame events.

        Returns:
            tuple: (running, events_dict)
        """
        events = {
            'input': [],  # (KEY_DOWN | KEY_UP, action) in arrival order
            'map': None,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False, events
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False, events
                elif event.key in KEY_ACTIONS:
                    events['input'].append((KEY_DOWN, KEY_ACTIONS[event.key]))
                elif event.key in MAP_KEYS:
                    events['map'] = MAP_KEYS[event.key]
            elif event.type == pygame.KEYUP:
                if event.key in KEY_ACTIONS:
                    events['input'].append((KEY_UP, KEY_ACTIONS[event.key]))

        return True, events

    def wait_frame(self, fps=config.TARGET_FPS):
        """Limit the frame rate; returns nanoseconds since the previous frame."""
        return self.clock.tick(fps) * 1_000_000

    def cleanup(self):
        """Clean up pygame."""
        pygame.quit()
