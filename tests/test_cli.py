"""
Tests for the create-typical command line.
"""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from create_typical.cli import app

cli = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch('create_typical.cli.setup_logging'):
        yield


@pytest.fixture
def model_file(sample_model, parser, tmp_path):
    path = tmp_path / "office.idf"
    parser.save(sample_model, path)
    return path


class TestOptions:

    def test_lists_enumerations(self):
        result = cli.invoke(app, ["options"])
        assert result.exit_code == 0
        assert "ASHRAE 169-2013-5A" in result.output
        assert "90.1-2013" in result.output
        assert "ASHRAESmallOffice.idf" in result.output

    def test_version(self):
        result = cli.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestValidateMapping:

    def test_valid_mapping(self, example_mapping_path, model_file):
        result = cli.invoke(app, ["validate-mapping", str(example_mapping_path), str(model_file)])
        assert result.exit_code == 0
        assert "PSZ-AC" in result.output
        assert "Core_ZN" in result.output

    def test_unknown_zone(self, write_mapping, model_file):
        path = write_mapping({"systems": [{"thermal_zones": ["Attic"]}]})
        result = cli.invoke(app, ["validate-mapping", str(path), str(model_file)])
        assert result.exit_code == 1
        assert "Attic" in result.output

    def test_missing_mapping(self, tmp_path, model_file):
        result = cli.invoke(app, ["validate-mapping", str(tmp_path / "nope.json"), str(model_file)])
        assert result.exit_code == 1


class TestRun:

    def test_invalid_template(self, model_file):
        result = cli.invoke(app, ["run", str(model_file), "--template", "90.1-2022", "-c", "ASHRAE 169-2013-5A"])
        assert result.exit_code == 1
        assert "Invalid argument template" in result.output

    def test_lookup_failure(self, model_file):
        result = cli.invoke(app, ["run", str(model_file)])
        assert result.exit_code == 1
        assert "failed" in result.output

    def test_success_writes_output(self, model_file, fake_generator, parser, tmp_path):
        output = tmp_path / "typical.idf"

        with patch('create_typical.measure.measure.OpenStudioStandardsGenerator',
                   return_value=fake_generator), \
                patch('create_typical.measure.measure.add_design_days_and_weather_file',
                      return_value="Chicago Ohare Intl Ap"):
            result = cli.invoke(app, [
                "run", str(model_file),
                "-c", "ASHRAE 169-2013-5A",
                "-t", "90.1-2013",
                "-o", str(output),
            ])

        assert result.exit_code == 0, result.output
        assert output.exists()
        assert parser.get_zone_names(parser.load(output)) == ["Core_ZN", "Perimeter_ZN_1", "Perimeter_ZN_2"]
        assert fake_generator.calls[0]["template"] == "90.1-2013"
