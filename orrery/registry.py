"""Per-frame position updates and name lookups for tracked bodies."""

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

import numpy as np

from .catalog import normalize_name
from .propagator import propagate

logger = logging.getLogger(__name__)


class DuplicateBodyError(ValueError):
    """Raised when two bodies share the same identifier."""


class PositionBuffer:
    """Array of published positions (km), one row per body handle."""

    def __init__(self, size: int):
        self.positions = np.zeros((size, 3), dtype=np.float64)
        self.published = np.zeros(size, dtype=bool)

    def publish(self, handle: int, position_km) -> None:
        self.positions[handle] = position_km
        self.published[handle] = True

    def __getitem__(self, handle: int) -> np.ndarray:
        return self.positions[handle]

    def __len__(self) -> int:
        return len(self.positions)


class BodyRegistry:
    """Handle table built once from the tracked bodies.

    Handles are indices into the body list; identifiers must be unique. The
    registry is the only place where propagated state is pushed out to the
    rendering layer, through any object exposing
    ``publish(handle, position_km)``.
    """

    def __init__(self, bodies: Iterable):
        self._bodies = tuple(bodies)
        handles = {}
        for handle, body in enumerate(self._bodies):
            key = body.key
            if key in handles:
                raise DuplicateBodyError(f"duplicate body identifier '{key}'")
            handles[key] = handle
        self._handles = MappingProxyType(handles)
        self._content = MappingProxyType({b.key: b.panel_id for b in self._bodies})
        self._tracked = tuple(h for h, b in enumerate(self._bodies) if b.has_elements)
        logger.debug(
            "Registry built with %d bodies (%d propagated)", len(self._bodies), len(self._tracked)
        )

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator:
        return iter(enumerate(self._bodies))

    def __contains__(self, name) -> bool:
        return normalize_name(name) in self._handles

    @property
    def bodies(self) -> tuple:
        return self._bodies

    def handle_of(self, name: str) -> int:
        """Return the handle for ``name``; raises ``KeyError`` if unknown."""
        return self._handles[normalize_name(name)]

    def body(self, handle: int):
        return self._bodies[handle]

    def new_buffer(self) -> PositionBuffer:
        return PositionBuffer(len(self._bodies))

    def place_static(self, publisher) -> None:
        """Initial placement: reference distance on +x for fallback bodies."""
        for handle, body in enumerate(self._bodies):
            if not body.has_elements:
                publisher.publish(handle, np.array([body.reference_distance_km, 0.0, 0.0]))

    def update(self, epoch_jd: float, publisher) -> int:
        """Re-propagate every catalogued body and publish its position.

        Bodies without elements keep whatever was published for them before.
        Returns the number of positions published.
        """
        for handle in self._tracked:
            publisher.publish(handle, propagate(self._bodies[handle].elements, epoch_jd))
        return len(self._tracked)

    def positions(self, epoch_jd: float) -> dict:
        """``{key: position_km}`` for every body at ``epoch_jd``."""
        buffer = self.new_buffer()
        self.place_static(buffer)
        self.update(epoch_jd, buffer)
        return {body.key: buffer[h].copy() for h, body in enumerate(self._bodies)}

    def content_id(self, name: str) -> Optional[str]:
        """Content-panel identifier for ``name`` or ``None`` if not tracked."""
        return self._content.get(normalize_name(name))
