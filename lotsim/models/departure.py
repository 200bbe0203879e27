"""
주차 시간에 따른 출차 확률 모델
"""
import numpy as np

from lotsim.config import MAX_PARKING_DURATION


class TriangularDistribution:
    """삼각 분포 (하한, 최빈값, 상한)"""

    def __init__(self, low: float, mode: float, high: float):
        if not low <= mode <= high or low == high:
            raise ValueError("triangular distribution requires low <= mode <= high and low < high")
        self.low = low
        self.mode = mode
        self.high = high
        self.peak = 2.0 / (high - low)  # 최빈값에서의 확률 밀도

    def pdf(self, x: float) -> float:
        """x 지점의 확률 밀도 (구간 밖이면 0)"""
        if x < self.low or x > self.high:
            return 0.0
        return float(np.interp(x, [self.low, self.mode, self.high], [0.0, self.peak, 0.0]))


# 주차 시간에 따른 출차 확률 분포
departure_pdf = TriangularDistribution(0, MAX_PARKING_DURATION / 2, MAX_PARKING_DURATION)


def departure_probability(dwell: int) -> float:
    """
    주차한 지 dwell초가 지난 차량이 이번 초에 출차할 확률을 반환합니다.

    최대 주차 시간에 도달한 차량은 확률과 관계없이 강제 출차되므로
    호출하는 쪽에서 먼저 확인해야 합니다.
    """
    return departure_pdf.pdf(dwell)
