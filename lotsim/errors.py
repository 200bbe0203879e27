"""
주차장 시뮬레이션에서 사용하는 예외 클래스 모음
"""


class LotSimError(Exception):
    """시뮬레이터 예외의 기반 클래스"""


class ConfigurationError(LotSimError, ValueError):
    """레이아웃 파일이나 실행 인자가 잘못된 경우"""


class VacancyError(LotSimError, LookupError):
    """비어 있는 주차면에서 차량을 빼려고 한 경우"""
