"""
주차장 점유 시뮬레이션 명령행 진입점

사용법:
    python main.py <lot-design filename> <hourly rate of arrival>
    python main.py data/parking.inf 11 --seed 7 --results-dir results --plot
"""
import argparse
import os
import re
import time
from typing import List, Optional

from lotsim.config import SEED, SIMULATION_DURATION
from lotsim.errors import ConfigurationError
from lotsim.models.parking_lot import ParkingLot
from lotsim.simulation.simulator import ParkingSimulator
from lotsim.utils.logger import SimulationLogger
from lotsim.utils.random_generator import RandomGenerator
from lotsim.utils.visualizer import LotVisualizer

USAGE = (
    "Usage: python main.py <lot-design filename> <hourly rate of arrival>\n"
    "Example: python main.py data/parking.inf 11"
)

RATE_PATTERN = re.compile(r"^\d+$")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='주차장 점유 시뮬레이션', usage=USAGE)
    parser.add_argument("layout", nargs="?", help="주차장 레이아웃 파일 경로")
    parser.add_argument("rate", nargs="?", help="시간당 도착 차량 수 (양의 정수)")
    parser.add_argument("--seed", type=int, default=SEED, help=f"랜덤 시드 (기본값: {SEED})")
    parser.add_argument("--steps", type=int, default=SIMULATION_DURATION,
                        help=f"시뮬레이션 시간 (초, 기본값: {SIMULATION_DURATION})")
    parser.add_argument("--results-dir", type=str, help="이벤트 로그와 통계를 저장할 디렉토리")
    parser.add_argument("--plot", action="store_true", help="점유 그래프와 주차장 이미지 저장")
    parser.add_argument("--quiet", action="store_true", help="이벤트별 출력 생략")
    return parser.parse_args(argv)


def parse_rate(value: str) -> int:
    """
    시간당 도착 차량 수 검증

    Raises:
        ConfigurationError: 양의 정수가 아닌 경우
    """
    if not RATE_PATTERN.match(value) or int(value) <= 0:
        raise ConfigurationError("The hourly rate of arrival should be a positive integer!")
    return int(value)


def main(argv: Optional[List[str]] = None) -> int:
    """
    메인 실행 함수

    Returns:
        int: 종료 코드 (0: 정상, 1: 설정 오류)
    """
    args = parse_args(argv)

    if args.layout is None or args.rate is None:
        print(USAGE)
        return 1

    try:
        rate = parse_rate(args.rate)
        if args.steps < 0:
            raise ConfigurationError("The number of simulation steps should be non-negative!")
        lot = ParkingLot.from_file(args.layout)
    except ConfigurationError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"Total number of parkable spots (capacity): {lot.get_total_capacity()}")

    # 결과 저장 디렉토리 설정
    results_dir = args.results_dir or ("results" if args.plot else None)
    log_file = stats_file = None
    if results_dir:
        os.makedirs(results_dir, exist_ok=True)
        print(f"[INFO] 결과 저장 디렉토리: {results_dir}")
        log_file = os.path.join(results_dir, "simulation_log.csv")
        stats_file = os.path.join(results_dir, "simulation_stats.json")

    logger = SimulationLogger(log_file=log_file, stats_file=stats_file, verbose=not args.quiet)
    sim = ParkingSimulator(lot, rate, args.steps, rng=RandomGenerator(args.seed), logger=logger)

    print("=== SIMULATION START ===")
    start = time.perf_counter()
    summary = sim.simulate()
    elapsed_ms = (time.perf_counter() - start) * 1000
    print("=== SIMULATION END ===")
    print()
    print(f"Simulation took {elapsed_ms:.0f}ms.")
    print()
    print(f"Length of car queue at the front at the end of simulation: {summary['incoming_backlog']}")

    if not args.quiet:
        print()
        logger.print_summary()

    if results_dir:
        logger.save_stats(extra={"simulation": summary})
        print(f"[INFO] 통계가 {stats_file}에 저장되었습니다.")
        if args.plot:
            logger.generate_plots(results_dir)
            image = LotVisualizer(lot, results_dir).visualize()
            print(f"[INFO] 그래프와 주차장 이미지({image})가 저장되었습니다.")

    return 0
