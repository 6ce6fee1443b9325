"""Keplerian element sets with linear secular rates."""

from dataclasses import asdict, dataclass, fields
from typing import Mapping, NamedTuple

from . import constants as C


class CatalogError(ValueError):
    """Raised when catalog data cannot be turned into elements."""


class CurrentElements(NamedTuple):
    """Element values evaluated at a particular epoch."""

    a_au: float
    e: float
    i_deg: float
    node_deg: float
    peri_deg: float
    L_deg: float

    @property
    def a_km(self) -> float:
        return self.a_au * C.AU_KM

    @property
    def peri_arg_deg(self) -> float:
        """Argument of perihelion, ``peri - node``."""
        return self.peri_deg - self.node_deg

    @property
    def mean_anomaly_deg(self) -> float:
        """Mean anomaly ``L - peri`` (not normalized)."""
        return self.L_deg - self.peri_deg


@dataclass(frozen=True)
class KeplerianElements:
    """Osculating elements at J2000.0 and their rates per Julian century.

    Units
    -----
    ``a_au``/``da_au`` in astronomical units, ``e``/``de`` dimensionless,
    every other pair in degrees. ``node`` is the longitude of the ascending
    node, ``peri`` the longitude of perihelion and ``L`` the mean longitude.
    """

    a_au: float
    da_au: float
    e: float
    de: float
    i_deg: float
    di_deg: float
    node_deg: float
    dnode_deg: float
    peri_deg: float
    dperi_deg: float
    L_deg: float
    dL_deg: float

    epoch_jd = C.J2000_JD

    def at_centuries(self, T: float) -> CurrentElements:
        """Evaluate every element ``T`` Julian centuries after J2000.0."""
        return CurrentElements(
            a_au=self.a_au + self.da_au * T,
            e=self.e + self.de * T,
            i_deg=self.i_deg + self.di_deg * T,
            node_deg=self.node_deg + self.dnode_deg * T,
            peri_deg=self.peri_deg + self.dperi_deg * T,
            L_deg=self.L_deg + self.dL_deg * T,
        )

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_record(cls, record: Mapping) -> "KeplerianElements":
        """Build elements from a catalog record.

        Raises
        ------
        CatalogError
            If a field is missing or is not a number.
        """
        if not isinstance(record, Mapping):
            raise CatalogError(f"record must be an object, got {type(record).__name__}")
        values = {}
        for name in cls.field_names():
            if name not in record:
                raise CatalogError(f"missing field '{name}'")
            value = record[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CatalogError(f"field '{name}' is not a number: {value!r}")
            values[name] = float(value)
        return cls(**values)

    def to_record(self) -> dict:
        return asdict(self)
