import json
import logging

import pytest

from orrery.catalog import DEFAULT_CATALOG_PATH, ElementCatalog, normalize_name
from orrery.elements import CatalogError, KeplerianElements

PLANETS = ["mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune"]


def _record(**overrides):
    rec = {name: 0.0 for name in KeplerianElements.field_names()}
    rec["a_au"] = 1.0
    rec.update(overrides)
    return rec


def test_default_catalog_has_planets(catalog):
    for name in PLANETS:
        assert name in catalog
    assert catalog["earth"].a_au == 1.00000261
    assert catalog["earth"].dL_deg == 35999.37244981
    assert catalog.rejected == ()


def test_lookup_is_case_insensitive(catalog):
    assert catalog["EARTH"] is catalog["earth"]
    assert " Jupiter " in catalog
    assert catalog.get("Pluto") is catalog["pluto"]
    assert catalog.get("vulcan") is None


def test_normalize_name_interns():
    a = normalize_name("Saturn")
    b = normalize_name("".join(["SAT", "URN"]))
    assert a == "saturn"
    assert a is b


def test_catalog_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog["earth"] = catalog["mars"]


def test_malformed_record_is_skipped(tmp_path, caplog):
    broken = _record()
    del broken["dL_deg"]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"Good": _record(e=0.1), "broken": broken}))

    with caplog.at_level(logging.ERROR, logger="orrery.catalog"):
        cat = ElementCatalog.load(path)

    assert list(cat) == ["good"]
    assert cat.rejected == ("broken",)
    assert "dL_deg" in caplog.text
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1


def test_non_numeric_field_is_rejected():
    cat = ElementCatalog({"x": _record(e="0.1"), "y": _record(i_deg=True), "z": [1, 2]})
    assert len(cat) == 0
    assert set(cat.rejected) == {"x", "y", "z"}


def test_top_level_must_be_object(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(CatalogError):
        ElementCatalog.load(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ElementCatalog.load(tmp_path / "nope.json")


def test_accepts_element_instances():
    el = KeplerianElements.from_record(_record(e=0.2))
    cat = ElementCatalog({"Ceres": el})
    assert cat["ceres"] is el


def test_to_json_reloads(tmp_path, catalog):
    path = tmp_path / "copy.json"
    path.write_text(catalog.to_json())
    assert dict(ElementCatalog.load(path)) == dict(catalog)


def test_default_path_exists():
    assert DEFAULT_CATALOG_PATH.is_file()
