"""Tests for spot records and the FIFO spot queue."""

import pytest

from lotsim.models.car import CarType
from lotsim.models.spot import Spot, SpotQueue
from conftest import make_car


class TestSpot:
    def test_str(self):
        spot = Spot(make_car(CarType.SMALL, "AAA111"), 42)
        assert str(spot) == "SMALL(AAA111), timestamp: 42"


class TestSpotQueue:
    def test_fifo_order_and_length(self):
        queue = SpotQueue()
        first = Spot(make_car(plate="AAA111"), 1)
        second = Spot(make_car(plate="BBB222"), 2)
        queue.enqueue(first)
        queue.enqueue(second)

        assert len(queue) == 2
        assert queue.dequeue() is first
        assert queue.dequeue() is second
        assert queue.is_empty()

    def test_peek_does_not_remove(self):
        queue = SpotQueue()
        spot = Spot(make_car(), 0)
        queue.enqueue(spot)

        assert queue.peek() is spot
        assert len(queue) == 1

    def test_empty_queue(self):
        queue = SpotQueue()
        assert queue.peek() is None
        assert len(queue) == 0
        with pytest.raises(IndexError):
            queue.dequeue()
