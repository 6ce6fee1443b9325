"""Pygame drawing helpers for bodies and orbit traces.

This layer only reads published positions (km) and orbit traces; it never
propagates anything itself.
"""

import pygame
import pygame.gfxdraw
import numpy as np
from . import constants as C


def radius_to_pixels(radius_km):
    """Exaggerated on-screen radius for a body, clamped to a readable range."""
    return int(max(C.MIN_BODY_PIXELS, min(C.MAX_BODY_PIXELS, radius_km * C.BODY_PIXEL_SCALE)))


class BodySprite:
    """Visual state of one registered body."""

    def __init__(self, handle, body):
        self.handle = handle
        self.body = body
        self.name = body.name
        self.color = tuple(body.color)
        self.radius_pixels = radius_to_pixels(body.radius_km)
        self.visible = True
        self.last_screen_pos = np.zeros(2)

    def update_screen_pos(self, position_km, camera):
        self.last_screen_pos = camera.world_to_screen(position_km)
        return self.last_screen_pos

    def hit(self, screen_pos):
        """Whether ``screen_pos`` lies on the sprite (with a small margin)."""
        if not self.visible:
            return False
        r = self.radius_pixels + C.PICK_MARGIN_PIXELS
        dx = screen_pos[0] - self.last_screen_pos[0]
        dy = screen_pos[1] - self.last_screen_pos[1]
        return dx * dx + dy * dy <= r * r

    def draw(self, screen, draw_labels, highlighted=False):
        if not self.visible:
            return
        x, y = int(self.last_screen_pos[0]), int(self.last_screen_pos[1])
        pygame.gfxdraw.filled_circle(screen, x, y, self.radius_pixels, self.color)
        pygame.gfxdraw.aacircle(screen, x, y, self.radius_pixels, self.color)
        if highlighted:
            pygame.gfxdraw.aacircle(screen, x, y, self.radius_pixels + 3, C.WHITE)

        if draw_labels:
            font = pygame.font.Font(None, 16)
            label = font.render(self.name, True, C.WHITE)
            screen.blit(label, (x + self.radius_pixels + 2, y - self.radius_pixels - 2))


def build_sprites(registry):
    return [BodySprite(handle, body) for handle, body in registry]


def draw_orbit_trace(screen, trace_km, camera, color=C.ORBIT_COLOR):
    """Draw a closed orbit trace as an anti-aliased polyline."""
    if trace_km is None or len(trace_km) < 2:
        return
    points = camera.world_to_screen(trace_km)
    pygame.draw.aalines(screen, color, False, [(float(px), float(py)) for px, py in points])


def draw_sun(screen, camera):
    x, y = (int(v) for v in camera.world_to_screen(np.zeros(3)))
    pygame.gfxdraw.filled_circle(screen, x, y, C.SUN_RADIUS_PIXELS, C.SUN_COLOR)
    pygame.gfxdraw.aacircle(screen, x, y, C.SUN_RADIUS_PIXELS, C.SUN_COLOR)


def pick_sprite(sprites, screen_pos):
    """Return the top-most sprite under ``screen_pos`` or ``None``."""
    for sprite in reversed(sprites):
        if sprite.hit(screen_pos):
            return sprite
    return None
