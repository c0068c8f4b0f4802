"""
NPC - 商人与农夫：固定位置、两帧动画、三句循环对话、各自的报价表
"""

from typing import List, Optional, Tuple

from .api import TILE_SIZE
from .trade import Offer, MERCHANT_OFFERS, FARMER_OFFERS
from .world import Zone, MERCHANT_ZONE, FARMER_ZONE, MERCHANT_POS, FARMER_POS


# 动画每 0.5 秒切换一帧
ANIMATION_INTERVAL_MS = 500
# 两次翻页之间的最短间隔
DIALOGUE_DELAY_MS = 100


class Npc:
    """交易 NPC"""

    size = TILE_SIZE

    def __init__(self, name: str, pos: Tuple[int, int], zone: Zone, dialogues: List[str],
                 offers: List[Offer], sprite: str, near_sprite: Optional[str] = None,
                 trade_title: str = "", trade_verb: str = "trade",
                 confirm_title: str = "Confirm Trade"):
        self.name = name
        self.x, self.y = pos
        self.zone = zone
        self.dialogues = list(dialogues)
        self.offers = offers
        self.trade_title = trade_title or f"{name.capitalize()}'s Trading Menu"
        self.trade_verb = trade_verb
        self.confirm_title = confirm_title
        self._sprite = sprite
        self._near_sprite = near_sprite
        self.cursor = 0
        self.frame = 1
        self.near = False
        self._last_anim_ms = 0
        self._last_advance_ms: Optional[int] = None

    @property
    def line(self) -> str:
        return self.dialogues[self.cursor]

    def update(self, now_ms: int, beside_player: bool) -> None:
        """推进动画；玩家靠近时换用 near 贴图（若有）"""
        near = beside_player and self._near_sprite is not None
        if now_ms - self._last_anim_ms > ANIMATION_INTERVAL_MS:
            if near != self.near:
                self.frame = 1
            else:
                self.frame = 2 if self.frame == 1 else 1
            self.near = near
            self._last_anim_ms = now_ms

    def speak(self) -> str:
        """开始对话，回到第一句"""
        self.cursor = 0
        self._last_advance_ms = None
        return self.line

    def cycle_dialogue(self, now_ms: int) -> bool:
        """翻到下一句（循环），距离上次翻页不足 DIALOGUE_DELAY_MS 则忽略"""
        if self._last_advance_ms is not None and now_ms - self._last_advance_ms < DIALOGUE_DELAY_MS:
            return False
        self.cursor = (self.cursor + 1) % len(self.dialogues)
        self._last_advance_ms = now_ms
        return True

    def sprite_key(self) -> str:
        base = self._near_sprite if self.near else self._sprite
        return f"{self.name}/{base}_{self.frame}"


def make_merchant() -> Npc:
    return Npc(
        "merchant", MERCHANT_POS, MERCHANT_ZONE,
        [
            "Hello! I'm a merchant.",
            "I sell various seeds for your farm!",
            "Would you like to buy something?",
        ],
        MERCHANT_OFFERS,
        sprite="merchant_down", near_sprite="merchant_near",
        trade_verb="buy it", confirm_title="Confirm Purchase",
    )


def make_farmer() -> Npc:
    return Npc(
        "farmer", FARMER_POS, FARMER_ZONE,
        [
            "Hello! I'm a farmer.",
            "I'll buy your crops and sell you upgrades!",
            "Take a look at my stock",
        ],
        FARMER_OFFERS,
        sprite="farmer_left",
    )
