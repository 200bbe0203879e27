"""
주차장 시뮬레이션을 실행하는 모듈
"""
from typing import Any, Dict, Optional

import simpy

from lotsim.config import MAX_PARKING_DURATION, SECONDS_PER_HOUR
from lotsim.models.car import Car
from lotsim.models.departure import departure_probability
from lotsim.models.parking_lot import ParkingLot
from lotsim.models.spot import Spot, SpotQueue
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator


class ParkingSimulator:
    """
    1초 단위로 도착, 출차, 입차, 출구 처리를 반복하는 주차장 시뮬레이터

    매 초(tick)마다 다음 순서로 처리합니다.
        1. 도착 확률에 따라 무작위 차량을 입차 대기열에 추가
        2. 주차된 차량마다 주차 시간에 따라 출차 여부 결정 (최대 주차 시간이면 강제 출차)
        3. 입차 대기열 맨 앞 차량의 주차 시도 (성공해야만 대기열에서 제거)
        4. 출차 대기열에서 한 대만 내보냄
        5. 시계 1초 증가
    """

    def __init__(self,
                 lot: ParkingLot,
                 per_hour_arrival_rate: int,
                 steps: int,
                 rng: Optional[RandomGenerator] = None,
                 logger: Optional[SimulationLogger] = None,
                 env: Optional[simpy.Environment] = None):
        """
        시뮬레이터를 초기화합니다.

        Args:
            lot: 시뮬레이션할 주차장
            per_hour_arrival_rate: 시간당 평균 도착 차량 수
            steps: 시뮬레이션 길이 (초)
            rng: 베르누이 시행과 무작위 차량 생성을 담당하는 난수 발생기
            logger: 이벤트 로거
            env: SimPy 환경 (None이면 새로 생성)
        """
        if per_hour_arrival_rate < 0:
            raise ValueError("per_hour_arrival_rate must be non-negative")
        if steps < 0:
            raise ValueError("steps must be non-negative")

        self.lot = lot
        self.per_hour_arrival_rate = per_hour_arrival_rate
        self.probability_of_arrival_per_sec = per_hour_arrival_rate / SECONDS_PER_HOUR
        self._steps = steps
        self._clock = 0

        self.rng = rng or RandomGenerator()
        self.logger = logger or SimulationLogger(verbose=False)
        self.env = env or simpy.Environment()

        self._incoming_queue = SpotQueue()  # 입차를 기다리는 차량
        self._outgoing_queue = SpotQueue()  # 방금 출차한 차량

    @property
    def clock(self) -> int:
        return self._clock

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def is_finished(self) -> bool:
        return self._clock >= self._steps

    @property
    def incoming_queue(self) -> SpotQueue:
        return self._incoming_queue

    @property
    def outgoing_queue(self) -> SpotQueue:
        return self._outgoing_queue

    def _handle_arrival(self) -> None:
        """도착 확률에 따라 새 차량을 입차 대기열에 추가"""
        if self.rng.event_occurred(self.probability_of_arrival_per_sec):
            car = self.rng.generate_random_car()
            self._incoming_queue.enqueue(Spot(car, self._clock))
            self.logger.log_event(self._clock, car, "arrive", queue=len(self._incoming_queue))

    def _handle_departures(self) -> None:
        """주차된 모든 차량에 대해 출차 여부를 결정"""
        for i, j, spot in list(self.lot.occupied_cells()):
            dwell = self._clock - spot.timestamp
            forced = dwell >= MAX_PARKING_DURATION
            if not forced and not self.rng.event_occurred(departure_probability(dwell)):
                continue
            removed = self.lot.remove(i, j)
            self._outgoing_queue.enqueue(removed)
            self.logger.log_event(self._clock, removed.car, "depart", pos=(i, j),
                                  occupancy=self.lot.get_total_occupancy(), forced=forced)

    def _handle_entry(self) -> None:
        """입차 대기열 맨 앞 차량의 주차 시도"""
        head = self._incoming_queue.peek()
        if head is None:
            return
        if self.lot.attempt_parking(head.car, self._clock):
            self._incoming_queue.dequeue()
            self.logger.log_event(self._clock, head.car, "park_success",
                                  pos=self._find_position(head.car),
                                  occupancy=self.lot.get_total_occupancy())

    def _handle_exit(self) -> None:
        """출차 대기열에서 한 대만 내보냄"""
        if self._outgoing_queue.is_empty():
            return
        spot = self._outgoing_queue.dequeue()
        self.logger.log_event(self._clock, spot.car, "exit",
                              occupancy=self.lot.get_total_occupancy())

    def _find_position(self, car: Car) -> Optional[tuple]:
        """현재 시각에 주차된 차량의 위치"""
        for i, j, spot in self.lot.occupied_cells():
            if spot.car is car and spot.timestamp == self._clock:
                return i, j
        return None

    def step(self) -> None:
        """
        시뮬레이션을 1초 진행합니다.

        Raises:
            RuntimeError: 이미 시뮬레이션이 끝난 경우
        """
        if self.is_finished:
            raise RuntimeError("simulation already finished")
        self._handle_arrival()
        self._handle_departures()
        self._handle_entry()
        self._handle_exit()
        self._clock += 1

    def tick_process(self):
        """남은 시간 동안 1초마다 step()을 실행하는 SimPy 프로세스"""
        while not self.is_finished:
            self.step()
            yield self.env.timeout(1)

    def simulate(self) -> Dict[str, Any]:
        """
        시뮬레이션을 끝까지 실행합니다.

        종료 시점에 주차장이나 대기열에 남아 있는 차량은 그대로 둡니다.

        Returns:
            Dict[str, Any]: summary() 결과
        """
        self.env.process(self.tick_process())
        self.env.run()
        return self.summary()

    def summary(self) -> Dict[str, Any]:
        """시뮬레이션 통계 반환"""
        return {
            "steps": self._steps,
            "clock": self._clock,
            "per_hour_arrival_rate": self.per_hour_arrival_rate,
            "capacity": self.lot.get_total_capacity(),
            "occupancy": self.lot.get_total_occupancy(),
            "incoming_backlog": len(self._incoming_queue),
            "outgoing_backlog": len(self._outgoing_queue),
            "arrivals": self.logger.stats["arrivals"],
            "entries": self.logger.stats["entries"],
            "departures": self.logger.stats["departures"],
            "forced_departures": self.logger.stats["forced_departures"],
            "exits": self.logger.stats["exits"],
        }
