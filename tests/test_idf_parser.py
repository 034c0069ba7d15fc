"""
Tests for the structured IDF parser.
"""

from pathlib import Path

import pytest

from create_typical.core.idf_parser import IDFParser, get_parser


class TestIDFParserLoad:
    """Test IDF loading functionality."""

    def test_load_from_string(self, parser, sample_idf_content):
        """Test loading IDF from string content."""
        idf = parser.load_string(sample_idf_content)
        assert idf is not None
        assert parser.get_zone_count(idf) == 3

    def test_save_and_load(self, parser, sample_model, tmp_path):
        path = tmp_path / "office.idf"
        parser.save(sample_model, path)

        reloaded = parser.load(path)
        assert parser.get_zone_names(reloaded) == parser.get_zone_names(sample_model)

    def test_load_missing_file(self, parser, tmp_path):
        with pytest.raises(FileNotFoundError):
            parser.load(tmp_path / "missing.idf")

    def test_new_model_is_empty(self, parser):
        assert parser.count_objects(parser.new()) == 0


class TestQueries:

    def test_zone_names_in_model_order(self, parser, sample_model):
        assert parser.get_zone_names(sample_model) == ["Core_ZN", "Perimeter_ZN_1", "Perimeter_ZN_2"]

    def test_building_name(self, parser, sample_model):
        assert parser.get_building_name(sample_model) == "Small Office"

    def test_building_name_missing(self, parser):
        assert parser.get_building_name(parser.new()) is None

    def test_count_objects(self, parser, sample_model):
        assert parser.count_objects(sample_model) == 4

    def test_site_location(self, parser, make_model):
        assert parser.get_site_location_name(make_model(["A"])) is None
        model = make_model(["A"], location_name="Boise Air Terminal")
        assert parser.get_site_location_name(model) == "Boise Air Terminal"

    def test_weather_file(self, parser, sample_model, tmp_path):
        assert parser.get_weather_file(sample_model) is None
        sample_model.epw = str(tmp_path / "site.epw")
        assert parser.get_weather_file(sample_model) == tmp_path / "site.epw"

    def test_shared_parser(self):
        assert get_parser() is get_parser()
        assert isinstance(get_parser(), IDFParser)
