"""
游戏逻辑 - 每个 tick 的状态机更新，以及弹窗回答后的结算

状态转换：
    PLAY      -- E 靠近 NPC -->  DIALOGUE
    PLAY      -- I ----------->  INVENTORY  -- I / Esc --> PLAY
    PLAY      -- P ----------->  PAUSE      -- P -------> PLAY
    DIALOGUE  -- 点击 3 次 --->  TRADE      -- 结算/取消 --> PLAY
    DIALOGUE / TRADE / INVENTORY -- Esc --> PLAY
弹窗挂起期间不推进任何模拟；计时基于真实时间，恢复后动画/生长会"跳"一下
"""

import logging
from typing import Any, Optional

from .api import CropKind, GameState, SEED_ITEM
from .context import GameContext
from .controls import Key
from .npc import Npc
from .prompts import PromptPurpose, confirm, choice, notice
from .trade import execute_offer, find_offer, not_enough

logger = logging.getLogger(__name__)


# 点击次数超过该值后对话结束，进入交易
DIALOGUE_CLICKS = 2

_CLOSABLE = (GameState.DIALOGUE, GameState.TRADE, GameState.INVENTORY)


def update(ctx: GameContext, now_ms: int) -> None:
    """执行一个逻辑 tick"""
    keys = ctx.input
    if ctx.pending is not None:
        keys.end_tick()
        return

    if keys.consume(Key.SECONDARY):
        ctx.show_help = not ctx.show_help
    if keys.consume(Key.PAUSE):
        _toggle_pause(ctx)

    if ctx.state is GameState.PLAY:
        ctx.player.update(keys)
        ctx.merchant.update(now_ms, ctx.beside(ctx.merchant))
        ctx.plot.update(now_ms)
        ctx.farmer.update(now_ms, ctx.beside(ctx.farmer))

        if keys.pressed(Key.INTERACT):
            for npc in ctx.npcs:
                if ctx.beside(npc):
                    keys.consume(Key.INTERACT)
                    _start_dialogue(ctx, npc)
                    break

        if keys.consume(Key.INVENTORY):
            ctx.state = GameState.INVENTORY
    elif ctx.state is GameState.INVENTORY and keys.consume(Key.INVENTORY):
        ctx.state = GameState.PLAY

    # 地块交互不受游戏状态限制，只看位置与交互键
    if ctx.beside_plot() and keys.consume(Key.INTERACT):
        _open_plot_prompt(ctx)

    if keys.consume(Key.ESCAPE) and ctx.state in _CLOSABLE:
        _back_to_play(ctx)

    if ctx.state is GameState.DIALOGUE:
        _update_dialogue(ctx, now_ms)

    if ctx.state is GameState.TRADE and ctx.pending is None:
        _open_trade_menu(ctx)

    keys.end_tick()


def answer_prompt(ctx: GameContext, answer: Any, now_ms: int) -> None:
    """外部界面回传弹窗结果"""
    prompt = ctx.pending
    if prompt is None:
        return
    ctx.pending = None
    logger.debug("prompt %s answered: %r", prompt.purpose.value, answer)

    if prompt.purpose is PromptPurpose.HARVEST:
        _resolve_harvest(ctx, answer is True)
    elif prompt.purpose is PromptPurpose.PLANT:
        _resolve_plant(ctx, answer, now_ms)
    elif prompt.purpose is PromptPurpose.TRADE_PICK:
        _resolve_trade_pick(ctx, answer)
    elif prompt.purpose is PromptPurpose.TRADE_CONFIRM:
        _resolve_trade_confirm(ctx, prompt.offer if answer is True else None)


def _toggle_pause(ctx: GameContext) -> None:
    if ctx.state is GameState.PLAY:
        ctx.state = GameState.PAUSE
    elif ctx.state is GameState.PAUSE:
        ctx.state = GameState.PLAY


def _back_to_play(ctx: GameContext) -> None:
    ctx.state = GameState.PLAY
    ctx.active_npc = None
    ctx.click_count = 0


def _start_dialogue(ctx: GameContext, npc: Npc) -> None:
    npc.speak()
    ctx.active_npc = npc
    ctx.click_count = 0
    ctx.state = GameState.DIALOGUE


def _update_dialogue(ctx: GameContext, now_ms: int) -> None:
    clicked = ctx.input.consume_click()
    # 回车与鼠标点击等效
    if ctx.input.consume(Key.ENTER) or clicked:
        if ctx.active_npc.cycle_dialogue(now_ms):
            ctx.click_count += 1
    elif ctx.click_count > DIALOGUE_CLICKS:
        ctx.click_count = 0
        ctx.state = GameState.TRADE


def _open_plot_prompt(ctx: GameContext) -> None:
    if ctx.plot.planted:
        ctx.pending = confirm(PromptPurpose.HARVEST, "Crop Plot", "Would you like to harvest the crop?")
    else:
        ctx.pending = choice(PromptPurpose.PLANT, "Crop Plot", "Would you like to plant a crop?",
                             [k.display_name for k in CropKind])


def _resolve_harvest(ctx: GameContext, yes: bool) -> None:
    if not yes:
        return
    if ctx.plot.fully_grown:
        ctx.plot.harvest(ctx.inventory)
    else:
        ctx.pending = notice("Try harvesting later!", "Crops aren't ready yet!", error=True)


def _crop_by_name(name: Optional[str]) -> Optional[CropKind]:
    for kind in CropKind:
        if kind.display_name == name:
            return kind
    return None


def _resolve_plant(ctx: GameContext, answer: Optional[str], now_ms: int) -> None:
    kind = _crop_by_name(answer)
    if kind is None or ctx.plot.planted:
        return
    seed = SEED_ITEM[kind]
    short = ctx.inventory.exchange({seed: 1}, {})
    if short is not None:
        ctx.pending = notice(not_enough(short), "Denied!", error=True)
        return
    ctx.plot.plant(kind, now_ms)


def _open_trade_menu(ctx: GameContext) -> None:
    npc = ctx.active_npc
    if npc is None:
        _back_to_play(ctx)
        return
    ctx.pending = choice(PromptPurpose.TRADE_PICK, npc.trade_title, "Choose an item to trade:",
                         [o.label for o in npc.offers])


def _resolve_trade_pick(ctx: GameContext, answer: Optional[str]) -> None:
    npc = ctx.active_npc
    offer = find_offer(npc.offers, answer) if npc else None
    if offer is None:
        _back_to_play(ctx)
        ctx.pending = notice("No item selected.")
        return
    ctx.pending = confirm(
        PromptPurpose.TRADE_CONFIRM, npc.confirm_title,
        f"You selected: {offer.label}. Do you want to {npc.trade_verb}?",
        offer=offer, options=["Buy", "Cancel"],
    )


def _resolve_trade_confirm(ctx: GameContext, offer) -> None:
    _back_to_play(ctx)
    if offer is None:
        ctx.pending = notice("Transaction canceled.")
        return
    result = execute_offer(offer, ctx.inventory, ctx.plot)
    if result.won:
        ctx.won = True
    if result.ok:
        ctx.pending = notice(result.message, "Receipt")
    else:
        ctx.pending = notice(result.message, "Denied!", error=True)
