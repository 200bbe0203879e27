"""
주차장 레이아웃과 점유 상태를 시각화하는 모듈입니다.
"""
import os
import platform
from typing import Optional

import matplotlib as mpl
import matplotlib.colors as mcolors
import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np

from lotsim.models.car import CarType
from lotsim.models.parking_lot import ParkingLot
from lotsim.utils.lot_loader import LotLayoutLoader


def setup_korean_font() -> None:
    """운영체제별 한글 폰트 설정"""
    if platform.system() == 'Windows':
        plt.rcParams['font.family'] = 'Malgun Gothic'  # 윈도우 한글 폰트
    elif platform.system() == 'Darwin':  # macOS
        plt.rcParams['font.family'] = 'AppleGothic'    # 맥OS 한글 폰트
    else:  # Linux
        plt.rcParams['font.family'] = 'NanumGothic'    # 리눅스 한글 폰트

    mpl.rcParams['axes.unicode_minus'] = False   # 마이너스 기호 깨짐 방지


class LotVisualizer:
    """
    주차장 상태를 그리드 이미지로 표현하는 클래스
    """

    # 주차면 종류별 색상
    CELL_COLORS = {
        CarType.NA: '#D3D3D3',        # 주차 불가: 밝은 회색
        CarType.ELECTRIC: '#4CAF50',  # 전기차 전용: 진한 초록색
        CarType.SMALL: '#ADD8E6',     # 소형: 연한 파란색
        CarType.REGULAR: '#90EE90',   # 일반: 연한 초록색
        CarType.LARGE: '#FFD700',     # 대형: 금색
    }
    OCCUPIED_COLOR = '#FF6B6B'        # 점유 중: 빨간색

    LEGEND_LABELS = {
        CarType.NA: '주차 불가',
        CarType.ELECTRIC: '전기차',
        CarType.SMALL: '소형',
        CarType.REGULAR: '일반',
        CarType.LARGE: '대형',
    }

    def __init__(self, lot: ParkingLot, output_dir: str = "results"):
        """
        Args:
            lot: 시각화할 주차장
            output_dir: 이미지 저장 디렉토리
        """
        self.lot = lot
        self.output_dir = output_dir
        setup_korean_font()

    def build_color_grid(self) -> np.ndarray:
        """셀별 RGB 색상 배열 (rows x cols x 3)"""
        grid = np.zeros((self.lot.num_rows, self.lot.num_spots_per_row, 3))
        for i in range(self.lot.num_rows):
            for j in range(self.lot.num_spots_per_row):
                if self.lot.get_spot_at(i, j) is not None:
                    color = self.OCCUPIED_COLOR
                else:
                    color = self.CELL_COLORS[self.lot.get_spot_type(i, j)]
                grid[i, j] = mcolors.to_rgb(color)
        return grid

    def visualize(self, filename: str = "lot_layout.png", title: Optional[str] = None) -> str:
        """
        현재 주차장 상태를 이미지로 저장합니다.

        Returns:
            str: 저장된 이미지 경로
        """
        os.makedirs(self.output_dir, exist_ok=True)
        grid = self.build_color_grid()

        fig, ax = plt.subplots(figsize=(max(4, self.lot.num_spots_per_row), max(3, self.lot.num_rows)))
        ax.imshow(grid, interpolation='nearest')

        # 셀마다 레이블 표시
        for i in range(self.lot.num_rows):
            for j in range(self.lot.num_spots_per_row):
                label = LotLayoutLoader.get_label_by_car_type(self.lot.get_spot_type(i, j))
                ax.text(j, i, label, ha='center', va='center', fontsize=8)

        ax.set_xticks(range(self.lot.num_spots_per_row))
        ax.set_yticks(range(self.lot.num_rows))
        ax.set_title(title or f"주차장 상태 (점유 {self.lot.get_total_occupancy()}/{self.lot.get_total_capacity()})")

        handles = [mpatches.Patch(color=self.CELL_COLORS[t], label=self.LEGEND_LABELS[t]) for t in CarType]
        handles.append(mpatches.Patch(color=self.OCCUPIED_COLOR, label='점유 중'))
        ax.legend(handles=handles, bbox_to_anchor=(1.02, 1), loc='upper left')

        path = os.path.join(self.output_dir, filename)
        fig.savefig(path, bbox_inches='tight')
        plt.close(fig)
        return path
