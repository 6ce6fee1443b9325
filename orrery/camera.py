import numpy as np
from . import constants as C

_FLIP_Y = np.array([1.0, -1.0])


class Camera:
    """Top-down view of the ecliptic plane; ``zoom`` is pixels per km."""

    def __init__(self, zoom=C.ZOOM_BASE, pan_offset=None):
        self.zoom = float(zoom)
        self.pan_offset = (
            np.array(pan_offset, dtype=float) if pan_offset is not None else C.INITIAL_PAN_OFFSET.astype(float).copy()
        )

    def world_to_screen(self, pos_km):
        """Convert heliocentric positions (km) to screen coordinates.

        Accepts a single vector or an ``(n, 3)`` array; ecliptic +y points up.
        """
        pos = np.asarray(pos_km, dtype=float)
        return pos[..., :2] * _FLIP_Y * self.zoom + self.pan_offset

    def screen_to_world(self, screen_pos):
        """Inverse of :meth:`world_to_screen` on the ``z = 0`` plane."""
        xy = (np.asarray(screen_pos, dtype=float) - self.pan_offset) / self.zoom * _FLIP_Y
        return np.array([xy[0], xy[1], 0.0])

    def zoom_at(self, screen_pos, factor):
        """Scale the zoom keeping the world point under ``screen_pos`` fixed."""
        anchor = self.screen_to_world(screen_pos)
        self.zoom = float(np.clip(self.zoom * factor, C.ZOOM_MIN, C.ZOOM_MAX))
        self.pan_offset = np.asarray(screen_pos, dtype=float) - anchor[:2] * _FLIP_Y * self.zoom

    def update_focus(self, focus_pos_km, screen_center):
        """Smoothly update the camera pan to follow the focus target."""
        if focus_pos_km is None:
            return
        target = np.asarray(screen_center, dtype=float) - np.asarray(focus_pos_km, dtype=float)[:2] * _FLIP_Y * self.zoom
        self.pan_offset += (target - self.pan_offset) * C.CAMERA_SMOOTHING
