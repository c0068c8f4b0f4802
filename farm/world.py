"""
游戏世界 - 单屏场地边界与交互区域
"""

from dataclasses import dataclass
from typing import Tuple

from .api import TILE_SIZE, SCREEN_WIDTH, SCREEN_HEIGHT


@dataclass(frozen=True)
class Zone:
    """静态矩形交互区域，四边均为开区间"""
    name: str
    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left < x < self.right and self.top < y < self.bottom


MERCHANT_ZONE = Zone("merchant", 0, 0, TILE_SIZE * 2, TILE_SIZE * 2)
FARMER_ZONE = Zone("farmer", TILE_SIZE * 10, TILE_SIZE, TILE_SIZE * 13, TILE_SIZE * 3)
CROP_PLOT_ZONE = Zone("crop_plot", TILE_SIZE / 2, TILE_SIZE * 5, TILE_SIZE * 6.5, TILE_SIZE * 10)

# 实体位置（像素）
PLAYER_START = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
MERCHANT_POS = (TILE_SIZE, TILE_SIZE)
FARMER_POS = (TILE_SIZE * 11, TILE_SIZE * 2)
CROP_PLOT_POS = (TILE_SIZE, TILE_SIZE * 5)
CROP_PLOT_SIZE = TILE_SIZE * 6


def clamp_to_field(x: int, y: int) -> Tuple[int, int]:
    """保证一个瓦片大小的包围盒留在场地内"""
    x = max(0, min(x, SCREEN_WIDTH - TILE_SIZE))
    y = max(0, min(y, SCREEN_HEIGHT - TILE_SIZE))
    return x, y
