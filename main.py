#!/usr/bin/env python3
"""
주차장 점유 시뮬레이션 메인 실행 파일

사용법:
    python main.py <lot-design filename> <hourly rate of arrival>
"""
import sys

from lotsim.main import main

if __name__ == "__main__":
    sys.exit(main())
