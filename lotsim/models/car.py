"""
주차장에 들어오는 차량과 차종/주차면 호환 규칙을 나타내는 모델
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class CarType(Enum):
    """차종 겸 주차면 종류 (NA는 주차 불가 칸 표시용)"""
    NA = "NA"
    ELECTRIC = "ELECTRIC"
    SMALL = "SMALL"
    REGULAR = "REGULAR"
    LARGE = "LARGE"


# 차종별로 주차 가능한 주차면 종류 (앞에 있을수록 선호)
SPOT_PREFERENCE: Dict[CarType, Tuple[CarType, ...]] = {
    CarType.ELECTRIC: (CarType.ELECTRIC, CarType.SMALL, CarType.REGULAR, CarType.LARGE),
    CarType.SMALL: (CarType.SMALL, CarType.REGULAR, CarType.LARGE),
    CarType.REGULAR: (CarType.REGULAR, CarType.LARGE),
    CarType.LARGE: (CarType.LARGE,),
}

# 실제 차량으로 존재할 수 있는 차종
CAR_TYPES: Tuple[CarType, ...] = tuple(SPOT_PREFERENCE)


def fits(spot_type: CarType, car_type: CarType) -> bool:
    """
    주어진 주차면에 해당 차종이 주차할 수 있는지 확인합니다.

    Args:
        spot_type: 레이아웃 상의 주차면 종류
        car_type: 차량 종류

    Returns:
        bool: 주차 가능 여부 (NA 주차면은 항상 False)
    """
    return spot_type in SPOT_PREFERENCE.get(car_type, ())


def preference_rank(spot_type: CarType, car_type: CarType) -> int:
    """
    차종 기준 주차면 선호 순위를 반환합니다. (0이 가장 선호, 주차 불가면 -1)
    """
    order = SPOT_PREFERENCE.get(car_type, ())
    if spot_type not in order:
        return -1
    return order.index(spot_type)


@dataclass(frozen=True)
class Car:
    """주차장에 들어오는 차량"""
    plate: str  # 번호판 (예: ABC123)
    car_type: CarType

    def __post_init__(self):
        """차종 검증"""
        if self.car_type not in SPOT_PREFERENCE:
            raise ValueError(f"car_type must be one of {[t.name for t in CAR_TYPES]}")

    def __str__(self) -> str:
        return f"{self.car_type.name}({self.plate})"
