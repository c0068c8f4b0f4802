"""
作物地块 - 种植、按时间生长、收获
生长使用真实时间（毫秒），每个阶段持续 stage_duration_ms，
每个 tick 最多推进一个阶段
"""

import logging
from typing import Optional

from .api import CropKind, GrowthStage, HARVEST_ITEM
from .inventory import Inventory
from .world import CROP_PLOT_POS, CROP_PLOT_SIZE

logger = logging.getLogger(__name__)


STAGE_DURATION_MS = 10000
GROWTH_BOOST_MS = 500
# 土壤营养最多把阶段时长降到这里
MIN_STAGE_DURATION_MS = 1000
HARVEST_YIELD = 20

_NEXT_STAGE = {
    GrowthStage.BABY: GrowthStage.GROWING,
    GrowthStage.GROWING: GrowthStage.GROWN,
}


class CropPlot:
    """唯一的作物地块"""

    size = CROP_PLOT_SIZE

    def __init__(self, stage_duration_ms: int = STAGE_DURATION_MS):
        self.x, self.y = CROP_PLOT_POS
        self.kind: Optional[CropKind] = None
        self.stage = GrowthStage.EMPTY
        self.stage_duration_ms = stage_duration_ms
        self._stage_started_ms = 0

    @property
    def planted(self) -> bool:
        return self.stage is not GrowthStage.EMPTY

    @property
    def fully_grown(self) -> bool:
        return self.stage is GrowthStage.GROWN

    @property
    def label(self) -> str:
        """empty / wheat_baby / carrot_growing / potato_grown ..."""
        if self.kind is None:
            return GrowthStage.EMPTY.value
        return f"{self.kind.value}_{self.stage.value}"

    def plant(self, kind: CropKind, now_ms: int) -> bool:
        """仅空地可种"""
        if self.planted:
            return False
        self.kind = kind
        self.stage = GrowthStage.BABY
        self._stage_started_ms = now_ms
        logger.info("planted %s", kind.value)
        return True

    def update(self, now_ms: int) -> bool:
        """距离上次阶段切换超过阶段时长则推进一个阶段，返回是否推进"""
        nxt = _NEXT_STAGE.get(self.stage)
        if nxt is None:
            return False
        if now_ms - self._stage_started_ms > self.stage_duration_ms:
            self.stage = nxt
            self._stage_started_ms = now_ms
            logger.debug("crop plot -> %s", self.label)
            return True
        return False

    def harvest(self, inventory: Inventory) -> int:
        """成熟才可收获，返回收获数量；未成熟不做任何修改"""
        if not self.fully_grown:
            return 0
        inventory.add(HARVEST_ITEM[self.kind], HARVEST_YIELD)
        logger.info("harvested %d %s", HARVEST_YIELD, self.kind.value)
        self.kind = None
        self.stage = GrowthStage.EMPTY
        return HARVEST_YIELD

    def can_boost(self) -> bool:
        return self.stage_duration_ms - GROWTH_BOOST_MS >= MIN_STAGE_DURATION_MS

    def growth_boost(self) -> bool:
        """永久缩短阶段时长，已到下限则返回 False"""
        if not self.can_boost():
            return False
        self.stage_duration_ms -= GROWTH_BOOST_MS
        return True

    def sprite_key(self) -> str:
        # 三种作物的幼苗共用一张图
        if self.stage is GrowthStage.BABY:
            return "object/plant_baby"
        return f"object/{self.label}"

