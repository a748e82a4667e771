"""Tests for the catalog and candidate list loaders."""

import pytest

from random_show_themes.utils.loaders import LoadError, load_candidates, load_catalog


def test_load_catalog_handles_aliases_defaults_and_unknown_fields(write_json, catalog_payload):
    catalog = load_catalog(write_json("shows.json", catalog_payload))

    assert sorted(catalog) == [1, 2, 3]
    bebop = catalog[1]
    assert bebop.id == 1
    assert bebop.url is None
    assert bebop.other_soundtrack == []
    assert catalog[2].url == "https://example.com/trigun"
    assert catalog[2].ending_themes == []
    assert catalog[3].other_soundtrack == ["Ride on Shooting Star"]
    assert not hasattr(catalog[3], "score")


def test_load_catalog_empty_object(write_json):
    assert load_catalog(write_json("shows.json", {})) == {}


def test_load_catalog_rejects_wrong_shape(write_json):
    path = write_json("shows.json", {"1": {"id": 1}})
    with pytest.raises(LoadError, match="couldn't parse"):
        load_catalog(path)


def test_load_catalog_rejects_non_integer_keys(write_json):
    path = write_json("shows.json", {"bebop": {"id": 1, "title": "Cowboy Bebop"}})
    with pytest.raises(LoadError):
        load_catalog(path)


def test_load_catalog_rejects_malformed_json(tmp_path):
    path = tmp_path / "shows.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadError, match="shows.json"):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(LoadError, match="couldn't read"):
        load_catalog(tmp_path / "nope.json")


def test_load_candidates_keeps_order_and_duplicates(write_json):
    assert load_candidates(write_json("list.json", [3, 1, 3, 2])) == [3, 1, 3, 2]


def test_load_candidates_rejects_negative_ids(write_json):
    with pytest.raises(LoadError):
        load_candidates(write_json("list.json", [1, -2]))


def test_load_candidates_rejects_object(write_json):
    with pytest.raises(LoadError, match="a list of show ids"):
        load_candidates(write_json("list.json", {"1": 1}))


@pytest.mark.parametrize("payload", [["1", 2], [1, 2.0], [True]])
def test_load_candidates_requires_json_integers(write_json, payload):
    with pytest.raises(LoadError):
        load_candidates(write_json("list.json", payload))
