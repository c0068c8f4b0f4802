"""
交易表 - 商人卖种子，农夫收购作物并出售升级
每条报价独立结算：材料不足则拒绝，背包保持不变
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .api import Item
from .crops import CropPlot
from .inventory import Inventory

logger = logging.getLogger(__name__)


EFFECT_GROWTH_BOOST = "growth_boost"
EFFECT_TROPHY = "trophy"

WIN_MESSAGE = "You've Successfully Completed the Game! Congrats!"


@dataclass
class Offer:
    """一条报价"""
    label: str
    cost: Dict[Item, int]
    gain: Dict[Item, int] = field(default_factory=dict)
    effect: str = ""  # "", "growth_boost", "trophy"
    receipt: str = ""  # 成功后显示的获得物，默认用 label


@dataclass
class TradeResult:
    ok: bool
    message: str
    won: bool = False


MERCHANT_OFFERS: List[Offer] = [
    Offer("Wheat Seed - 10 Gold", {Item.GOLD: 10}, {Item.WHEAT_SEEDS: 1}),
    Offer("Carrot Seed - 40 Gold", {Item.GOLD: 40}, {Item.CARROT_SEEDS: 1}),
    Offer("Potato Seed - 100 Gold", {Item.GOLD: 100}, {Item.POTATO_SEEDS: 1}),
]

FARMER_OFFERS: List[Offer] = [
    Offer("20 Gold - 20 Wheat", {Item.WHEAT: 20}, {Item.GOLD: 20}, receipt="20 Gold"),
    Offer("50 Gold - 10 Carrots", {Item.CARROTS: 10}, {Item.GOLD: 50}, receipt="50 Gold"),
    Offer("150 Gold - 20 Potatoes", {Item.POTATOES: 20}, {Item.GOLD: 150}, receipt="150 Gold"),
    Offer("Soil Nutrients - 50 Gold", {Item.GOLD: 50}, effect=EFFECT_GROWTH_BOOST,
          receipt="Soil Nutrients - Growth time improved"),
    Offer("SILVER TROPHY - 1000 GOLD", {Item.GOLD: 1000}, effect=EFFECT_TROPHY),
]


def find_offer(offers: List[Offer], label: Optional[str]) -> Optional[Offer]:
    for offer in offers:
        if offer.label == label:
            return offer
    return None


def not_enough(item: Item) -> str:
    return f"You don't have enough {item.display_name}"


def execute_offer(offer: Offer, inventory: Inventory, plot: CropPlot) -> TradeResult:
    """结算一条报价"""
    if offer.effect == EFFECT_GROWTH_BOOST and not plot.can_boost():
        return TradeResult(False, "The soil can't get any richer!")

    short = inventory.exchange(offer.cost, offer.gain)
    if short is not None:
        logger.info("trade rejected: %s (not enough %s)", offer.label, short.display_name)
        return TradeResult(False, not_enough(short))

    logger.info("trade done: %s", offer.label)
    if offer.effect == EFFECT_GROWTH_BOOST:
        plot.growth_boost()
    if offer.effect == EFFECT_TROPHY:
        return TradeResult(True, f"CONGRATS!: {WIN_MESSAGE}", won=True)
    return TradeResult(True, f"You obtained: {offer.receipt or offer.label}")
