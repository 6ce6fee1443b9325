"""Load-once table of Keplerian elements keyed by body name."""

import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Optional

from .elements import CatalogError, KeplerianElements

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("data") / "standish_catalog.json"


def normalize_name(name: str) -> str:
    """Return the interned, case-normalized identifier for ``name``."""
    return sys.intern(str(name).strip().lower())


class ElementCatalog(Mapping):
    """Read-only mapping of body identifier to :class:`KeplerianElements`.

    Lookups are case-insensitive. Malformed records are reported once when
    the catalog is built and left out, so the affected bodies fall back to
    static placement.
    """

    def __init__(self, entries: Optional[Mapping] = None):
        table = {}
        rejected = []
        for raw_name, record in (entries or {}).items():
            key = normalize_name(raw_name)
            if isinstance(record, KeplerianElements):
                elements = record
            else:
                try:
                    elements = KeplerianElements.from_record(record)
                except CatalogError as exc:
                    logger.error("Skipping catalog entry '%s': %s", raw_name, exc)
                    rejected.append(key)
                    continue
            if key in table:
                logger.warning("Duplicate catalog entry '%s'; keeping the last one", raw_name)
            table[key] = elements
        self._table = MappingProxyType(table)
        self.rejected = tuple(rejected)

    @classmethod
    def load(cls, path=None) -> "ElementCatalog":
        """Read a catalog JSON file (the bundled Standish table by default)."""
        path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
        data = json.loads(Path(path).read_text())
        if not isinstance(data, dict):
            raise CatalogError(f"{path}: expected a JSON object of body records")
        catalog = cls(data)
        logger.info(
            "Loaded %d catalog entries from %s (%d rejected)",
            len(catalog),
            path,
            len(catalog.rejected),
        )
        return catalog

    def __getitem__(self, name: str) -> KeplerianElements:
        return self._table[normalize_name(name)]

    def __contains__(self, name) -> bool:
        return normalize_name(name) in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def to_json(self) -> str:
        return json.dumps({k: v.to_record() for k, v in self._table.items()}, indent=4)

    def __repr__(self):
        return f"ElementCatalog({sorted(self._table)})"
