"""
시뮬레이션 이벤트를 기록하고 분석하는 로깅 시스템입니다.
"""
import csv
import json
import os
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd

from lotsim.config import SECONDS_PER_HOUR
from lotsim.models.car import Car
from lotsim.utils.visualizer import setup_korean_font

# 로그 엔트리 타입 정의
LogEntry = Dict[str, Any]

LOG_COLUMNS = ['time', 'car', 'car_type', 'event', 'row', 'col', 'occupancy']

# 이벤트별 콘솔 출력 형식
EVENT_MESSAGES = {
    "arrive": "{car} Arrived at timestamp {time}; queue length is {queue}",
    "park_success": "{car} Entered at timestamp {time}; occupancy is at {occupancy}",
    "depart": "{car} Exited at timestamp {time}; occupancy is at {occupancy}",
    "exit": "{car} EXITED at timestep {time}; occupancy is at {occupancy}",
}

# 이벤트별 통계 키
EVENT_STATS = {
    "arrive": "arrivals",
    "park_success": "entries",
    "depart": "departures",
    "exit": "exits",
}


class SimulationLogger:
    """시뮬레이션 이벤트를 기록하고 분석하는 클래스"""

    def __init__(self, log_file: Optional[str] = None, stats_file: Optional[str] = None,
                 verbose: bool = True):
        """
        로거를 초기화합니다.

        Args:
            log_file: 이벤트 CSV 파일 경로 (None이면 메모리에만 기록)
            stats_file: 통계 JSON 파일 경로
            verbose: 이벤트마다 콘솔 출력 여부
        """
        self.log_file = log_file
        self.stats_file = stats_file
        self.verbose = verbose

        self.log: List[LogEntry] = []

        # 로그 파일 초기화
        if self.log_file:
            with open(self.log_file, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(LOG_COLUMNS)

        # 통계 초기화
        self.stats = {
            "arrivals": 0,
            "entries": 0,
            "departures": 0,
            "forced_departures": 0,
            "exits": 0,
            "max_occupancy": 0,
        }

    def log_event(self, time: int, car: Car, event: str, pos: Optional[tuple] = None,
                  occupancy: Optional[int] = None, queue: Optional[int] = None,
                  forced: bool = False) -> None:
        """
        이벤트 로깅

        Args:
            time: 이벤트 발생 시각 (시뮬레이션 초)
            car: 대상 차량
            event: 이벤트 유형 (arrive, park_success, depart, exit)
            pos: 주차면 위치 (row, col), 선택적
            occupancy: 이벤트 직후 주차장 점유 대수
            queue: 이벤트 직후 입차 대기열 길이
            forced: 최대 주차 시간 초과로 인한 강제 출차 여부
        """
        if event not in EVENT_MESSAGES:
            raise ValueError(f"unknown event: {event}")

        entry: LogEntry = {
            'time': time,
            'car': car.plate,
            'car_type': car.car_type.name,
            'event': event,
            'row': pos[0] if pos else None,
            'col': pos[1] if pos else None,
            'occupancy': occupancy,
        }
        self.log.append(entry)

        # CSV 파일에 기록
        if self.log_file:
            with open(self.log_file, 'a', newline='', encoding='utf-8') as f:
                writer = csv.writer(f)
                writer.writerow(['' if entry[c] is None else entry[c] for c in LOG_COLUMNS])

        self.stats[EVENT_STATS[event]] += 1
        if forced:
            self.stats["forced_departures"] += 1
        if occupancy is not None:
            self.stats["max_occupancy"] = max(self.stats["max_occupancy"], occupancy)

        if self.verbose:
            print(EVENT_MESSAGES[event].format(car=car, time=time, occupancy=occupancy, queue=queue))

    def get_dataframe(self) -> pd.DataFrame:
        """로그를 판다스 DataFrame으로 변환해 반환합니다."""
        return pd.DataFrame(self.log, columns=LOG_COLUMNS)

    def save_stats(self, extra: Optional[Dict[str, Any]] = None) -> None:
        """통계 정보를 JSON 파일로 저장"""
        if not self.stats_file:
            return
        data = dict(self.stats)
        if extra:
            data.update(extra)
        with open(self.stats_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def hourly_event_counts(self) -> pd.DataFrame:
        """시간대별 이벤트 수 (행: 시간, 열: 이벤트)"""
        df = self.get_dataframe()
        if df.empty:
            return pd.DataFrame()
        df["hour"] = df["time"] // SECONDS_PER_HOUR
        return df.groupby(["hour", "event"]).size().unstack(fill_value=0)

    def print_summary(self) -> None:
        """이벤트 요약 출력"""
        df = self.get_dataframe()
        print("=== 이벤트 요약 ===")
        print(f"총 이벤트 수: {len(df)}")
        if df.empty:
            return
        print("\n이벤트 유형별 분포:")
        print(df.groupby("event").size())
        print("\n차종별 입차 수:")
        print(df[df.event == "park_success"].groupby("car_type").size())

    def generate_plots(self, results_dir: str) -> None:
        """시뮬레이션 결과를 그래프로 시각화"""
        setup_korean_font()
        df = self.get_dataframe()
        self._plot_occupancy(df, results_dir)
        self._plot_hourly_events(results_dir)

    def _plot_occupancy(self, df: pd.DataFrame, results_dir: str) -> None:
        """시간에 따른 주차장 점유 대수 그래프"""
        occ = df[df.event.isin(["park_success", "depart"])]

        plt.figure(figsize=(12, 6))
        plt.step(occ["time"] / SECONDS_PER_HOUR, occ["occupancy"], where="post")
        plt.title("시간에 따른 주차장 점유 대수")
        plt.xlabel("시간 (h)")
        plt.ylabel("주차 중인 차량 수")
        plt.grid(True)

        plt.savefig(os.path.join(results_dir, "parking_occupancy.png"))
        plt.close()

    def _plot_hourly_events(self, results_dir: str) -> None:
        """시간대별 도착/입차/출차 수 그래프"""
        hourly_stats = self.hourly_event_counts()

        plt.figure(figsize=(12, 6))
        for event, label in [("arrive", "도착"), ("park_success", "입차"), ("depart", "출차")]:
            if event in hourly_stats.columns:
                plt.plot(hourly_stats.index, hourly_stats[event], marker="o", label=label)
        plt.title("시간대별 도착/입차/출차")
        plt.xlabel("시간")
        plt.ylabel("횟수")
        plt.legend()
        plt.grid(True)

        plt.savefig(os.path.join(results_dir, "hourly_events.png"))
        plt.close()
