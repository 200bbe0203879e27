"""
시뮬레이션에 필요한 난수(베르누이 시행, 무작위 차량)를 제공하는 모듈
"""
import string
from typing import Dict, Optional

import numpy as np

from lotsim.config import CAR_TYPE_WEIGHTS, PLATE_DIGITS, PLATE_LETTERS, SEED
from lotsim.models.car import CAR_TYPES, Car, CarType


class RandomGenerator:
    """
    시드로 재현 가능한 난수 발생기

    시뮬레이터는 event_occurred / generate_random_car 두 메서드만 사용하므로
    테스트에서는 같은 메서드를 가진 객체로 바꿔 끼울 수 있습니다.
    """

    def __init__(self, seed: Optional[int] = SEED,
                 car_type_weights: Optional[Dict[str, float]] = None):
        """
        Args:
            seed: 난수 시드 (None이면 매번 다른 결과)
            car_type_weights: 차종 이름 -> 생성 가중치
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)

        weights = car_type_weights or CAR_TYPE_WEIGHTS
        unknown = [name for name in weights if name not in {t.name for t in CAR_TYPES}]
        if unknown:
            raise ValueError(f"unknown car types in weights: {unknown}")
        self._car_types = [CarType[name] for name in weights]
        probs = np.array(list(weights.values()), dtype=float)
        if probs.sum() <= 0 or (probs < 0).any():
            raise ValueError("car type weights must be non-negative with a positive sum")
        self._car_type_probs = probs / probs.sum()

    def event_occurred(self, probability: float) -> bool:
        """주어진 확률로 성공하는 베르누이 시행"""
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return bool(self._rng.random() < probability)

    def generate_random_plate(self) -> str:
        """무작위 번호판 (예: ABC123)"""
        letters = self._rng.choice(list(string.ascii_uppercase), size=PLATE_LETTERS)
        digits = self._rng.choice(list(string.digits), size=PLATE_DIGITS)
        return "".join(letters) + "".join(digits)

    def generate_random_car(self) -> Car:
        """가중치에 따라 차종을 골라 무작위 차량을 생성"""
        idx = self._rng.choice(len(self._car_types), p=self._car_type_probs)
        return Car(self.generate_random_plate(), self._car_types[idx])
