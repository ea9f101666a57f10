"""
Tests for the osmChange document builder
"""

import xml.etree.ElementTree as ET

import pytest

from osmkit.config import OSMAPIConfig
from osmkit.exceptions import ChangesetWriteError
from osmkit.osm.changeset import OsmChange
from osmkit.osm.models import OSMNode


def node(node_id, **tags):
    return OSMNode(id=node_id, lat=51.5, lon=-0.12, tags=tags).to_element()


def test_root_attributes():
    change = OsmChange(author="mapper", osm_config=OSMAPIConfig(generator="tests"))
    root = change.root
    assert root.tag == "osmChange"
    assert root.get("version") == "0.6"
    assert root.get("generator") == "tests"
    assert root.get("author") == "mapper"
    assert root.get("date")
    assert len(root) == 0


def test_creates_keep_call_order():
    change = OsmChange()
    for i in range(1, 6):
        change.add_create(node(-i), "42")

    groups = change.root.findall("create")
    assert len(groups) == 1
    created = list(groups[0])
    assert [n.get("id") for n in created] == ["-1", "-2", "-3", "-4", "-5"]
    assert all(n.get("version") == "1" for n in created)
    assert all(n.get("changeset") == "42" for n in created)


def test_create_and_modify_stay_separate():
    change = OsmChange()
    change.add_modify(node(10), "7", "3")
    change.add_create(node(-1), "7")
    change.add_modify(node(11), "7", "5")
    change.add_create(node(-2), "7")

    assert [g.tag for g in change.root] == ["modify", "create"]
    assert [n.get("id") for n in change.created] == ["-1", "-2"]
    assert [n.get("id") for n in change.modified] == ["10", "11"]
    assert [n.get("version") for n in change.modified] == ["3", "5"]


def test_changeset_id_at_insertion_time():
    change = OsmChange()
    change.add_create(node(-1), "100")
    change.add_create(node(-2), "200")
    assert [n.get("changeset") for n in change.created] == ["100", "200"]


def test_to_string_does_not_mutate_document():
    change = OsmChange()
    change.add_create(node(-1, amenity="bench"), "1")

    text = change.to_string()

    assert "\n" in text
    assert change.root.text is None
    assert change.root.find("create").text is None


def test_write_round_trip(tmp_path):
    change = OsmChange(author="mapper")
    change.add_create(node(-1, amenity="bench", name="A & B <bench>"), "42")
    change.add_modify(node(123, amenity="waste_basket"), "42", "4")
    path = tmp_path / "change.osc"

    change.write(str(path))
    parsed = ET.parse(str(path)).getroot()

    def structure(element):
        return (element.tag, dict(element.attrib), [structure(c) for c in element])

    assert structure(parsed) == structure(change.root)
    assert parsed.find("create/node/tag[@k='name']").get("v") == "A & B <bench>"


def test_write_overwrites(tmp_path):
    path = tmp_path / "change.osc"
    path.write_text("stale")

    OsmChange().write(str(path))

    assert ET.parse(str(path)).getroot().tag == "osmChange"


def test_write_unwritable_path(tmp_path):
    with pytest.raises(ChangesetWriteError):
        OsmChange().write(str(tmp_path / "missing" / "change.osc"))
