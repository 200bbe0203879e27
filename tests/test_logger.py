"""Tests for the simulation event logger."""

import csv
import json

import pytest

from lotsim.models.car import CarType
from lotsim.utils.logger import LOG_COLUMNS, SimulationLogger
from conftest import make_car


class TestLogEvent:
    def test_records_entry_and_stats(self):
        logger = SimulationLogger(verbose=False)
        car = make_car(CarType.SMALL, "AAA111")
        logger.log_event(10, car, "arrive", queue=1)
        logger.log_event(12, car, "park_success", pos=(0, 2), occupancy=1)
        logger.log_event(90, car, "depart", pos=(0, 2), occupancy=0, forced=True)

        assert logger.log[1] == {
            "time": 12, "car": "AAA111", "car_type": "SMALL", "event": "park_success",
            "row": 0, "col": 2, "occupancy": 1,
        }
        assert logger.stats["arrivals"] == 1
        assert logger.stats["entries"] == 1
        assert logger.stats["departures"] == 1
        assert logger.stats["forced_departures"] == 1
        assert logger.stats["max_occupancy"] == 1

    def test_console_lines(self, capsys):
        logger = SimulationLogger()
        car = make_car(CarType.LARGE, "XYZ789")
        logger.log_event(5, car, "park_success", pos=(0, 0), occupancy=3)
        logger.log_event(8, car, "depart", pos=(0, 0), occupancy=2)

        out = capsys.readouterr().out
        assert "LARGE(XYZ789) Entered at timestamp 5; occupancy is at 3" in out
        assert "LARGE(XYZ789) Exited at timestamp 8; occupancy is at 2" in out

    def test_unknown_event(self):
        with pytest.raises(ValueError):
            SimulationLogger(verbose=False).log_event(0, make_car(), "teleport")

    def test_csv_file(self, tmp_path):
        log_file = tmp_path / "log.csv"
        logger = SimulationLogger(log_file=str(log_file), verbose=False)
        logger.log_event(1, make_car(plate="AAA111"), "arrive", queue=1)

        with open(log_file, encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == LOG_COLUMNS
        assert rows[1][:4] == ["1", "AAA111", "REGULAR", "arrive"]


class TestAnalysis:
    def make_logger(self):
        logger = SimulationLogger(verbose=False)
        car = make_car()
        logger.log_event(100, car, "arrive", queue=1)
        logger.log_event(100, car, "park_success", pos=(0, 0), occupancy=1)
        logger.log_event(4000, car, "depart", pos=(0, 0), occupancy=0)
        logger.log_event(4000, car, "exit", occupancy=0)
        return logger

    def test_dataframe(self):
        df = self.make_logger().get_dataframe()
        assert list(df.columns) == LOG_COLUMNS
        assert len(df) == 4

    def test_empty_dataframe_has_columns(self):
        df = SimulationLogger(verbose=False).get_dataframe()
        assert df.empty
        assert list(df.columns) == LOG_COLUMNS

    def test_hourly_event_counts(self):
        counts = self.make_logger().hourly_event_counts()
        assert counts.loc[0, "park_success"] == 1
        assert counts.loc[1, "depart"] == 1

    def test_save_stats(self, tmp_path):
        stats_file = tmp_path / "stats.json"
        logger = SimulationLogger(stats_file=str(stats_file), verbose=False)
        logger.log_event(0, make_car(), "arrive", queue=1)
        logger.save_stats(extra={"simulation": {"steps": 10}})

        data = json.loads(stats_file.read_text(encoding="utf-8"))
        assert data["arrivals"] == 1
        assert data["simulation"] == {"steps": 10}

    def test_generate_plots(self, tmp_path):
        self.make_logger().generate_plots(str(tmp_path))
        assert (tmp_path / "parking_occupancy.png").exists()
        assert (tmp_path / "hourly_events.png").exists()
