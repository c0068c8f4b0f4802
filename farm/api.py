"""
游戏类型 - 内部使用
方向、游戏状态、作物、背包物品等枚举，以及屏幕尺寸常量
"""

from enum import Enum


# 屏幕设置：16x16 原始瓦片放大 3 倍
ORIGINAL_TILE_SIZE = 16
SCALE = 3
TILE_SIZE = ORIGINAL_TILE_SIZE * SCALE  # 48
MAX_SCREEN_COL = 16
MAX_SCREEN_ROW = 12
SCREEN_WIDTH = TILE_SIZE * MAX_SCREEN_COL  # 768
SCREEN_HEIGHT = TILE_SIZE * MAX_SCREEN_ROW  # 576

FPS = 60


class Direction(Enum):
    """朝向"""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class GameState(Enum):
    """顶层游戏状态，同一时刻只有一个"""
    PLAY = "play"
    PAUSE = "pause"
    DIALOGUE = "dialogue"
    TRADE = "trade"
    INVENTORY = "inventory"


class CropKind(Enum):
    """可种植作物，空地用 None 表示"""
    WHEAT = "wheat"
    CARROT = "carrot"
    POTATO = "potato"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class GrowthStage(Enum):
    """生长阶段"""
    EMPTY = "empty"
    BABY = "baby"
    GROWING = "growing"
    GROWN = "grown"


class Item(Enum):
    """背包物品，定义顺序即存档顺序"""
    GOLD = "Gold"
    WHEAT = "Wheat"
    CARROTS = "Carrots"
    POTATOES = "Potatoes"
    WHEAT_SEEDS = "Wheat Seeds"
    CARROT_SEEDS = "Carrot Seeds"
    POTATO_SEEDS = "Potato Seeds"

    @property
    def display_name(self) -> str:
        return self.value


# 作物 -> 收获物 / 种子
HARVEST_ITEM = {
    CropKind.WHEAT: Item.WHEAT,
    CropKind.CARROT: Item.CARROTS,
    CropKind.POTATO: Item.POTATOES,
}
SEED_ITEM = {
    CropKind.WHEAT: Item.WHEAT_SEEDS,
    CropKind.CARROT: Item.CARROT_SEEDS,
    CropKind.POTATO: Item.POTATO_SEEDS,
}
