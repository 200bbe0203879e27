"""Tests for the lot visualiser."""

import matplotlib.colors as mcolors

from lotsim.models.car import CarType
from lotsim.models.parking_lot import ParkingLot
from lotsim.utils.visualizer import LotVisualizer
from conftest import make_car


class TestLotVisualizer:
    def test_color_grid(self, tmp_path):
        lot = ParkingLot([[CarType.NA, CarType.REGULAR]])
        lot.park(0, 1, make_car(), 0)
        grid = LotVisualizer(lot, str(tmp_path)).build_color_grid()

        assert grid.shape == (1, 2, 3)
        assert tuple(grid[0, 0]) == mcolors.to_rgb(LotVisualizer.CELL_COLORS[CarType.NA])
        assert tuple(grid[0, 1]) == mcolors.to_rgb(LotVisualizer.OCCUPIED_COLOR)

    def test_visualize_writes_image(self, tmp_path):
        lot = ParkingLot([[CarType.ELECTRIC, CarType.SMALL], [CarType.LARGE, CarType.NA]])
        path = LotVisualizer(lot, str(tmp_path / "out")).visualize()
        assert (tmp_path / "out" / "lot_layout.png").exists()
        assert path.endswith("lot_layout.png")
