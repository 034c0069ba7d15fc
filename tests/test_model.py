"""
Tests for model overwrite and geometry presets.
"""

import pytest

from create_typical.model import (
    list_geometry_presets,
    load_geometry_model,
    overwrite_existing_model,
    resolve_geometry_path,
)
from create_typical.constants import EXISTING_GEOMETRY, GEOMETRY_FILES


class TestOverwrite:
    """Test in-place model replacement."""

    def test_content_replaced(self, parser, make_model):
        existing = make_model(["A", "B"], building_name="Old")
        new = make_model(["C"], building_name="New")

        result = overwrite_existing_model(existing, new)

        assert parser.get_zone_names(result) == ["C"]
        assert parser.get_building_name(result) == "New"

    def test_identity_preserved(self, make_model):
        existing = make_model(["A"])
        new = make_model(["C"])
        alias = existing

        result = overwrite_existing_model(existing, new)

        assert result is existing
        assert alias is result

    def test_object_count_matches_new_model(self, parser, make_model):
        existing = make_model(["A", "B", "C", "D"], location_name="Somewhere")
        new = make_model(["X", "Y"])

        overwrite_existing_model(existing, new)

        assert parser.count_objects(existing) == parser.count_objects(new)
        assert parser.get_site_location_name(existing) is None

    def test_new_model_untouched(self, parser, make_model):
        existing = make_model(["A"])
        new = make_model(["C", "D"], building_name="New")

        overwrite_existing_model(existing, new)
        existing.newidfobject('ZONE', Name='E')

        assert parser.get_zone_names(new) == ["C", "D"]

    def test_copies_are_independent(self, parser, make_model):
        existing = make_model(["A"])
        new = make_model(["C"])

        overwrite_existing_model(existing, new)
        existing.idfobjects['ZONE'][0].Name = "Renamed"

        assert parser.get_zone_names(new) == ["C"]

    def test_empty_new_model_empties_existing(self, parser, make_model):
        existing = make_model(["A", "B"])

        overwrite_existing_model(existing, parser.new())

        assert parser.count_objects(existing) == 0

    def test_same_model_is_noop(self, parser, make_model):
        model = make_model(["A", "B"])

        overwrite_existing_model(model, model)

        assert parser.get_zone_names(model) == ["A", "B"]

    def test_weather_file_kept(self, make_model, tmp_path):
        existing = make_model(["A"])
        existing.epw = str(tmp_path / "site.epw")

        overwrite_existing_model(existing, make_model(["B"]))

        assert existing.epw == str(tmp_path / "site.epw")


class TestGeometryPresets:

    def test_presets_exclude_existing_geometry(self):
        presets = list_geometry_presets()
        assert EXISTING_GEOMETRY not in presets
        assert len(presets) == len(GEOMETRY_FILES) - 1
        assert "ASHRAESmallOffice.idf" in presets

    def test_resolve_known_preset(self, geometry_dir):
        path = resolve_geometry_path("ASHRAESmallOffice.idf", geometry_dir)
        assert path == geometry_dir / "ASHRAESmallOffice.idf"

    def test_resolve_unknown_preset(self, geometry_dir):
        with pytest.raises(ValueError, match="Unknown geometry preset"):
            resolve_geometry_path("MyBuilding.idf", geometry_dir)

    def test_existing_geometry_is_not_a_preset(self, geometry_dir):
        with pytest.raises(ValueError):
            resolve_geometry_path(EXISTING_GEOMETRY, geometry_dir)

    def test_missing_preset_file(self, geometry_dir):
        with pytest.raises(FileNotFoundError, match="ASHRAEHospital.idf"):
            resolve_geometry_path("ASHRAEHospital.idf", geometry_dir)

    def test_load_preset(self, geometry_dir, parser):
        model = load_geometry_model("ASHRAESmallOffice.idf", geometry_dir, parser)
        assert parser.get_zone_count(model) == 5
        assert parser.get_building_name(model) == "ASHRAE Small Office"
