"""
시뮬레이션 환경 설정과 관련된 모든 상수 및 구성 값을 관리하는 모듈입니다.
"""
from typing import Dict

# 시뮬레이션 기본 설정
SEED = 422                              # 난수 생성기 시드
SECONDS_PER_HOUR = 3600
SIMULATION_DURATION = 24 * SECONDS_PER_HOUR   # 24시간 (초 단위)

# 주차 시간 설정
MAX_PARKING_DURATION = 8 * SECONDS_PER_HOUR   # 최대 주차 시간 (8시간)

# 주차장 레이아웃 파일 설정
LAYOUT_SEPARATOR = ","                  # 레이아웃 파일의 필드 구분자

# 무작위 차량 생성 설정 (차종 이름 -> 가중치)
CAR_TYPE_WEIGHTS: Dict[str, float] = {
    "ELECTRIC": 1.0,
    "SMALL": 1.0,
    "REGULAR": 1.0,
    "LARGE": 1.0,
}

# 번호판 형식 (영문 3자리 + 숫자 3자리)
PLATE_LETTERS = 3
PLATE_DIGITS = 3
