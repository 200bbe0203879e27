"""
주차장 레이아웃 파일을 읽어 주차면 종류 그리드로 변환하는 모듈
"""
from pathlib import Path
from typing import Dict, List, Union

from lotsim.config import LAYOUT_SEPARATOR
from lotsim.errors import ConfigurationError
from lotsim.models.car import CarType


class LotLayoutLoader:
    # 레이블 -> 주차면 종류 매핑 (대소문자 구분 없음)
    LABEL_TO_CAR_TYPE: Dict[str, CarType] = {
        "N": CarType.NA,
        "NA": CarType.NA,
        "E": CarType.ELECTRIC,
        "ELECTRIC": CarType.ELECTRIC,
        "S": CarType.SMALL,
        "SMALL": CarType.SMALL,
        "R": CarType.REGULAR,
        "REGULAR": CarType.REGULAR,
        "L": CarType.LARGE,
        "LARGE": CarType.LARGE,
    }

    # 주차면 종류 -> 출력용 레이블
    CAR_TYPE_TO_LABEL: Dict[CarType, str] = {
        CarType.NA: "N",
        CarType.ELECTRIC: "E",
        CarType.SMALL: "S",
        CarType.REGULAR: "R",
        CarType.LARGE: "L",
    }

    def __init__(self, separator: str = LAYOUT_SEPARATOR):
        """
        레이아웃 로더 초기화

        Args:
            separator: 한 행 안의 필드 구분자
        """
        self.separator = separator

    @classmethod
    def get_car_type_by_label(cls, label: str) -> CarType:
        """
        레이블 문자열을 주차면 종류로 변환

        Raises:
            ConfigurationError: 알 수 없는 레이블인 경우
        """
        car_type = cls.LABEL_TO_CAR_TYPE.get(label.strip().upper())
        if car_type is None:
            raise ConfigurationError(f"알 수 없는 주차면 레이블입니다: {label!r}")
        return car_type

    @classmethod
    def get_label_by_car_type(cls, car_type: CarType) -> str:
        return cls.CAR_TYPE_TO_LABEL[car_type]

    def parse(self, text: str) -> List[List[CarType]]:
        """
        레이아웃 텍스트를 주차면 종류 그리드로 변환합니다.

        빈 줄이 나오면 레이아웃 구간이 끝난 것으로 보고,
        첫 행의 필드 수가 한 행의 주차면 수가 됩니다.

        Args:
            text: 레이아웃 파일 내용

        Returns:
            List[List[CarType]]: 행 x 열 주차면 종류 그리드
        """
        design: List[List[CarType]] = []
        width = None
        for line_no, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                break
            fields = line.split(self.separator)
            if width is None:
                width = len(fields)
            elif len(fields) != width:
                raise ConfigurationError(
                    f"{line_no}번째 행의 주차면 수({len(fields)})가 첫 행({width})과 다릅니다."
                )
            design.append([self.get_car_type_by_label(field) for field in fields])

        if not design:
            raise ConfigurationError("레이아웃에 주차면 행이 없습니다.")
        return design

    def load(self, path: Union[str, Path]) -> List[List[CarType]]:
        """
        레이아웃 파일을 로드합니다.

        Args:
            path: 레이아웃 파일 경로

        Returns:
            List[List[CarType]]: 행 x 열 주차면 종류 그리드
        """
        file_path = Path(path)
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"레이아웃 파일을 읽을 수 없습니다: {file_path} ({e})") from e

        design = self.parse(text)
        print(f"[DEBUG] Loaded {file_path}: {len(design)}x{len(design[0])} grid")
        return design
