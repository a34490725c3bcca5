"""
Tests for the geocoding command-line interface.
"""
import json
from unittest.mock import patch

import pytest

from geocode_adapter.core import settings
from geocode_adapter.geocoding.base import Location
from geocode_adapter.geocoding.cli import main
from geocode_adapter.geocoding.precision import Precision


class TestCli:

    def test_response_file_summary(self, tmp_path, amphitheatre_json, capsys):
        path = tmp_path / "response.json"
        path.write_text(amphitheatre_json)

        assert main(["--response-file", str(path)]) == 0

        out = capsys.readouterr().out
        assert "37.423111" in out
        assert "Amphitheatre Pkwy" in out
        assert "address" in out

    def test_response_file_json(self, tmp_path, amphitheatre_json, capsys):
        path = tmp_path / "response.json"
        path.write_text(amphitheatre_json)

        assert main(["-f", str(path), "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["country"] == "United States"
        assert data["precision"] == "address"

    def test_zero_results_exit_code(self, tmp_path, make_payload, capsys):
        path = tmp_path / "response.json"
        path.write_text(make_payload("ZERO_RESULTS"))

        assert main(["--response-file", str(path)]) == 1
        assert "Address not found!" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--response-file", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 2

    def test_requires_a_source(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_address_without_key(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "GOOGLE_GEOCODING_API_KEY", "")

        assert main(["--address", "1600 Amphitheatre Pkwy"]) == 1
        assert "GOOGLE_GEOCODING_API_KEY" in capsys.readouterr().err

    def test_address_lookup(self, capsys):
        location = Location(latitude=48.8584, longitude=2.2945, locality="Paris",
                            country="France", precision=Precision.PREMISE)
        with patch("geocode_adapter.geocoding.providers.google.GoogleGeocoder.locate",
                   return_value=location) as locate:
            assert main(["--address", "Eiffel Tower"]) == 0

        locate.assert_called_once_with("Eiffel Tower")
        assert "Paris" in capsys.readouterr().out
