"""Tests for the lot layout loader."""

import pytest

from lotsim.errors import ConfigurationError
from lotsim.models.car import CarType
from lotsim.utils.lot_loader import LotLayoutLoader

E, S, R, L, NA = CarType.ELECTRIC, CarType.SMALL, CarType.REGULAR, CarType.LARGE, CarType.NA


class TestLabels:
    def test_short_and_long_labels(self):
        get = LotLayoutLoader.get_car_type_by_label
        assert get("E") is E
        assert get("electric") is E
        assert get(" SMALL ") is S
        assert get("r") is R
        assert get("Large") is L
        assert get("NA") is NA
        assert get("N") is NA

    def test_unknown_label(self):
        with pytest.raises(ConfigurationError):
            LotLayoutLoader.get_car_type_by_label("X")

    def test_label_round_trip_for_all_types(self):
        for car_type in CarType:
            label = LotLayoutLoader.get_label_by_car_type(car_type)
            assert LotLayoutLoader.get_car_type_by_label(label) is car_type


class TestParse:
    def test_basic_grid(self):
        design = LotLayoutLoader().parse("E, S, R\nN, L, R\n")
        assert design == [[E, S, R], [NA, L, R]]

    def test_blank_line_ends_layout(self):
        design = LotLayoutLoader().parse("R, R\nL, L\n\nnot, a, layout, row\n")
        assert design == [[R, R], [L, L]]

    def test_ragged_row(self):
        with pytest.raises(ConfigurationError):
            LotLayoutLoader().parse("R, R, R\nR, R\n")

    def test_empty_layout(self):
        with pytest.raises(ConfigurationError):
            LotLayoutLoader().parse("\nR, R\n")

    def test_custom_separator(self):
        design = LotLayoutLoader(separator=";").parse("E;S\n")
        assert design == [[E, S]]


class TestLoad:
    def test_load_file(self, write_layout):
        path = write_layout("S, R\nL, E\n")
        assert LotLayoutLoader().load(path) == [[S, R], [L, E]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            LotLayoutLoader().load(tmp_path / "missing.inf")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.inf"
        path.write_bytes(b"R, R\n\xff\xfe, L\n")
        with pytest.raises(ConfigurationError):
            LotLayoutLoader().load(path)
