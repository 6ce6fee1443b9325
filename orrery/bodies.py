"""Celestial body descriptors and the default planet list."""

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Mapping, Optional

from .catalog import normalize_name
from .elements import KeplerianElements

logger = logging.getLogger(__name__)

DEFAULT_ARTICLES_PATH = Path(__file__).with_name("data") / "articles.json"

# Physical values used for fallback placement and display.
DEFAULT_PLANETS = [
    {
        "name": "Mercury",
        "radius_km": 2.4e3,
        "reference_distance_km": 57.91e6,
        "period_days": 87.9691,
        "color": (102, 102, 102),
    },
    {
        "name": "Venus",
        "radius_km": 6.051e3,
        "reference_distance_km": 108.21e6,
        "period_days": 224.701,
        "color": (170, 170, 119),
    },
    {
        "name": "Earth",
        "radius_km": 6.3781e3,
        "reference_distance_km": 1.49898023e8,
        "period_days": 365.256,
        "color": (51, 187, 51),
    },
    {
        "name": "Mars",
        "radius_km": 3.389e3,
        "reference_distance_km": 2.27939366e8,
        "period_days": 686.980,
        "color": (187, 51, 51),
    },
    {
        "name": "Jupiter",
        "radius_km": 6.9911e4,
        "reference_distance_km": 7.78479e8,
        "period_days": 4332.59,
        "color": (170, 119, 34),
    },
    {
        "name": "Saturn",
        "radius_km": 5.8232e4,
        "reference_distance_km": 1.43353e9,
        "period_days": 10755.7,
        "color": (204, 170, 85),
    },
    {
        "name": "Uranus",
        "radius_km": 2.5362e4,
        "reference_distance_km": 2.870972e9,
        "period_days": 30688.5,
        "color": (119, 119, 255),
    },
    {
        "name": "Neptune",
        "radius_km": 2.4622e4,
        "reference_distance_km": 4.50e9,
        "period_days": 60195,
        "color": (68, 34, 170),
    },
]


@dataclass(frozen=True)
class CelestialBody:
    """A body tracked by the viewer.

    ``elements`` is ``None`` for bodies that are placed once from
    ``reference_distance_km`` and never re-propagated.
    """

    name: str
    radius_km: float
    color: tuple
    reference_distance_km: float
    period_days: Optional[float] = None
    elements: Optional[KeplerianElements] = None
    content_id: Optional[str] = None

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def has_elements(self) -> bool:
        return self.elements is not None

    @property
    def panel_id(self) -> str:
        """Identifier of the body's content panel, normalized like article keys."""
        return normalize_name(self.content_id) if self.content_id else self.key

    def with_elements(self, elements: Optional[KeplerianElements]) -> "CelestialBody":
        return replace(self, elements=elements)

    @classmethod
    def from_config(cls, cfg: Mapping) -> "CelestialBody":
        return cls(
            name=cfg["name"],
            radius_km=float(cfg["radius_km"]),
            color=tuple(cfg.get("color", (255, 255, 255))),
            reference_distance_km=float(cfg["reference_distance_km"]),
            period_days=cfg.get("period_days"),
            content_id=cfg.get("content_id"),
        )


def build_bodies(catalog: Mapping, planets: Iterable[Mapping] = DEFAULT_PLANETS) -> list:
    """Create bodies from config dicts, attaching catalog elements by name."""
    bodies = []
    for cfg in planets:
        body = CelestialBody.from_config(cfg)
        elements = catalog.get(body.key)
        if elements is None:
            logger.info("No catalog elements for '%s'; using a static circular orbit", body.name)
        bodies.append(body.with_elements(elements))
    return bodies


def load_articles(path=None) -> dict:
    """Load the content-panel texts, keyed by content identifier."""
    path = Path(path) if path is not None else DEFAULT_ARTICLES_PATH
    data = json.loads(Path(path).read_text())
    return {normalize_name(k): str(v) for k, v in data.items()}
