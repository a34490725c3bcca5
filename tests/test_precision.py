"""
Tests for the precision scale and place type classification.
"""
from itertools import permutations

import pytest

from geocode_adapter.geocoding.precision import Precision
from geocode_adapter.geocoding.providers.google import PRECISION, classify_precision


class TestPrecision:
    """Tests for the Precision scale."""

    def test_order_coarsest_to_finest(self):
        levels = [
            Precision.UNKNOWN,
            Precision.COUNTRY,
            Precision.REGION,
            Precision.LOCALITY,
            Precision.POSTAL_CODE,
            Precision.STREET,
            Precision.ADDRESS,
            Precision.PREMISE,
        ]
        assert sorted(Precision) == levels
        assert min(Precision) is Precision.UNKNOWN

    def test_label(self):
        assert Precision.POSTAL_CODE.label == "postal_code"
        assert str(Precision.ADDRESS) == "address"


class TestClassifyPrecision:
    """Tests for classify_precision."""

    def test_empty_is_unknown(self):
        assert classify_precision([]) is Precision.UNKNOWN

    def test_none_is_unknown(self):
        assert classify_precision(None) is Precision.UNKNOWN

    def test_unrecognized_is_unknown(self):
        assert classify_precision(["unrecognized_tag"]) is Precision.UNKNOWN

    def test_political_only_is_unknown(self):
        assert classify_precision(["political", "colloquial_area"]) is Precision.UNKNOWN

    @pytest.mark.parametrize("tag,expected", [
        ("country", Precision.COUNTRY),
        ("administrative_area_level_2", Precision.REGION),
        ("locality", Precision.LOCALITY),
        ("neighborhood", Precision.POSTAL_CODE),
        ("route", Precision.STREET),
        ("street_address", Precision.ADDRESS),
        ("point_of_interest", Precision.PREMISE),
    ])
    def test_single_tag(self, tag, expected):
        assert classify_precision([tag]) is expected

    def test_finest_tag_wins(self):
        assert classify_precision(["country", "street_address"]) is Precision.ADDRESS

    def test_unrecognized_tags_ignored(self):
        assert classify_precision(["establishment", "locality", "political"]) is Precision.LOCALITY

    def test_permutation_invariant(self):
        tags = ["political", "country", "route", "locality", "made_up"]
        results = {classify_precision(list(p)) for p in permutations(tags)}
        assert results == {Precision.STREET}

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PRECISION["route"] = Precision.PREMISE
