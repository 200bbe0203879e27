"""
주차장 레이아웃(주차면 종류)과 점유 상태, 주차면 배정 정책을 관리하는 모듈
"""
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from lotsim.errors import ConfigurationError, VacancyError
from lotsim.models.car import Car, CarType, fits, preference_rank
from lotsim.models.spot import Spot
from lotsim.utils.lot_loader import LotLayoutLoader


class ParkingLot:
    """주차장 클래스"""

    def __init__(self, lot_design: Sequence[Sequence[CarType]]):
        """
        주차장 초기화

        Args:
            lot_design: 행 x 열 주차면 종류 그리드 (생성 후 변경되지 않음)
        """
        if not lot_design or not lot_design[0]:
            raise ConfigurationError("주차장 레이아웃이 비어 있습니다.")
        width = len(lot_design[0])
        if any(len(row) != width for row in lot_design):
            raise ConfigurationError("주차장 레이아웃의 모든 행은 길이가 같아야 합니다.")

        self._lot_design: Tuple[Tuple[CarType, ...], ...] = tuple(tuple(row) for row in lot_design)
        self.num_rows = len(self._lot_design)
        self.num_spots_per_row = width

        # 점유 상태: (row, col) -> Spot 또는 None
        self._occupancy: List[List[Optional[Spot]]] = [
            [None] * self.num_spots_per_row for _ in range(self.num_rows)
        ]

    @classmethod
    def from_file(cls, path: Union[str, Path], loader: Optional[LotLayoutLoader] = None) -> "ParkingLot":
        """레이아웃 파일로부터 주차장을 생성합니다."""
        loader = loader or LotLayoutLoader()
        return cls(loader.load(path))

    def _check_bounds(self, i: int, j: int) -> None:
        """범위를 벗어난 좌표면 IndexError"""
        if not (0 <= i < self.num_rows and 0 <= j < self.num_spots_per_row):
            raise IndexError(f"No such parking index exists: ({i}, {j})")

    def _occupant(self, i: int, j: int) -> Spot:
        """(i, j)에 주차된 기록 반환, 비어 있으면 VacancyError"""
        self._check_bounds(i, j)
        spot = self._occupancy[i][j]
        if spot is None:
            raise VacancyError(f"There is no car parked at ({i}, {j})")
        return spot

    def get_spot_type(self, i: int, j: int) -> CarType:
        """(i, j) 주차면 종류"""
        self._check_bounds(i, j)
        return self._lot_design[i][j]

    def get_spot_at(self, i: int, j: int) -> Optional[Spot]:
        """(i, j)의 점유 기록 (범위 밖이거나 비어 있으면 None)"""
        if not (0 <= i < self.num_rows and 0 <= j < self.num_spots_per_row):
            return None
        return self._occupancy[i][j]

    def can_park_at(self, i: int, j: int, car: Car) -> bool:
        """
        차량이 (i, j)에 주차할 수 있는지 확인합니다.

        Returns:
            bool: 범위 안이고, 비어 있고, 차종이 주차면에 맞으면 True
        """
        if not (0 <= i < self.num_rows and 0 <= j < self.num_spots_per_row):
            return False
        if self._occupancy[i][j] is not None:
            return False
        return fits(self._lot_design[i][j], car.car_type)

    def park(self, i: int, j: int, car: Car, timestamp: int) -> bool:
        """
        (i, j)에 차량을 주차합니다.

        Args:
            i: 행 번호
            j: 행 안에서의 주차면 번호
            car: 주차할 차량
            timestamp: 주차 시각 (시뮬레이션 초)

        Returns:
            bool: 주차 성공 여부
        """
        try:
            self._check_bounds(i, j)
        except IndexError as e:
            print(f"[WARN] {e}")
            return False
        if not self.can_park_at(i, j, car):
            return False
        self._occupancy[i][j] = Spot(car, timestamp)
        return True

    def remove(self, i: int, j: int) -> Optional[Spot]:
        """
        (i, j)에 주차된 차량을 뺍니다.

        Returns:
            Optional[Spot]: 빼낸 점유 기록, 범위 밖이거나 비어 있으면 None
        """
        try:
            spot = self._occupant(i, j)
        except (IndexError, VacancyError) as e:
            print(f"[WARN] {e}")
            return None
        self._occupancy[i][j] = None
        return spot

    def find_best_spot(self, car: Car) -> Optional[Tuple[int, int]]:
        """
        주차장 전체에서 차량에 가장 알맞은 빈 주차면을 찾습니다.

        모든 행과 열을 한 번씩 훑으면서 지금까지의 최선 후보를 유지하고,
        선호 순위가 더 높은 주차면이 나올 때만 후보를 바꿉니다.
        (같은 순위면 먼저 찾은 주차면 유지)

        Returns:
            Optional[Tuple[int, int]]: (row, col) 또는 None
        """
        best = None
        best_rank = None
        for i in range(self.num_rows):
            for j in range(self.num_spots_per_row):
                if not self.can_park_at(i, j, car):
                    continue
                rank = preference_rank(self._lot_design[i][j], car.car_type)
                if best_rank is None or rank < best_rank:
                    best = (i, j)
                    best_rank = rank
        return best

    def attempt_parking(self, car: Car, timestamp: int) -> bool:
        """
        주차장 어디든 알맞은 주차면이 있으면 차량을 주차합니다.

        Args:
            car: 주차할 차량
            timestamp: 주차를 시도하는 시뮬레이션 시각

        Returns:
            bool: 주차 성공 여부 (실패 시 상태 변화 없음)
        """
        position = self.find_best_spot(car)
        if position is None:
            return False
        return self.park(position[0], position[1], car, timestamp)

    def occupied_cells(self) -> Iterator[Tuple[int, int, Spot]]:
        """점유된 주차면을 행 우선 순서로 (row, col, spot) 형태로 반환"""
        for i in range(self.num_rows):
            for j in range(self.num_spots_per_row):
                spot = self._occupancy[i][j]
                if spot is not None:
                    yield i, j, spot

    def get_total_capacity(self) -> int:
        """NA를 제외한 전체 주차면 수"""
        return sum(1 for row in self._lot_design for cell in row if cell != CarType.NA)

    def get_total_occupancy(self) -> int:
        """현재 주차된 차량 수"""
        return sum(1 for row in self._occupancy for spot in row if spot is not None)

    def __str__(self) -> str:
        """레이아웃과 점유 상태 문자열"""
        lines = ["==== Lot Design ===="]
        for row in self._lot_design:
            lines.append(", ".join(LotLayoutLoader.get_label_by_car_type(cell) for cell in row))
        lines.append("")
        lines.append("==== Parking Occupancy ====")
        for i in range(self.num_rows):
            for j in range(self.num_spots_per_row):
                spot = self._occupancy[i][j]
                lines.append(f"({i}, {j}): {spot if spot is not None else 'Unoccupied'}")
        return "\n".join(lines) + "\n"
