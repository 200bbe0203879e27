"""Shared fixtures for the simulator tests."""

from collections import deque

import pytest

from lotsim.models.car import Car, CarType


class ScriptedRandom:
    """Random source that replays a fixed list of trial outcomes.

    Every call to event_occurred consumes the next outcome (False once the
    script runs out) and records the probability it was asked about.
    """

    def __init__(self, outcomes=(), cars=()):
        self.outcomes = deque(outcomes)
        self.cars = deque(cars)
        self.calls = []

    def event_occurred(self, probability):
        self.calls.append(probability)
        return self.outcomes.popleft() if self.outcomes else False

    def generate_random_car(self):
        return self.cars.popleft()


def make_car(car_type=CarType.REGULAR, plate="ABC123"):
    return Car(plate, car_type)


@pytest.fixture
def write_layout(tmp_path):
    def _write(text, name="parking.inf"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
