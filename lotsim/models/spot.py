"""
주차면 점유 기록(Spot)과 입/출차 대기열
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from lotsim.models.car import Car


@dataclass(frozen=True)
class Spot:
    """차량이 주차면을 점유하고 있다는 기록"""
    car: Car
    timestamp: int  # 주차(또는 도착) 시각 (시뮬레이션 초)

    def __str__(self) -> str:
        return f"{self.car}, timestamp: {self.timestamp}"


class SpotQueue:
    """Spot 기록을 담는 FIFO 대기열"""

    def __init__(self):
        self._items: Deque[Spot] = deque()

    def enqueue(self, spot: Spot) -> None:
        """대기열 맨 뒤에 추가"""
        self._items.append(spot)

    def dequeue(self) -> Spot:
        """
        대기열 맨 앞의 기록을 꺼냅니다.

        Raises:
            IndexError: 대기열이 비어 있는 경우
        """
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Optional[Spot]:
        """맨 앞의 기록을 꺼내지 않고 반환 (비어 있으면 None)"""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
