"""
操作说明 - 逻辑按键、键位绑定与帮助面板内容
"""

from enum import Enum

import pygame


class Key(Enum):
    """逻辑按键，具体键位由 KEY_BINDINGS 决定"""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    INTERACT = "interact"
    INVENTORY = "inventory"
    PAUSE = "pause"
    ESCAPE = "escape"
    ENTER = "enter"
    SECONDARY = "secondary"


MOVEMENT_KEYS = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)

KEY_BINDINGS = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_e: Key.INTERACT,
    pygame.K_i: Key.INVENTORY,
    pygame.K_p: Key.PAUSE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_t: Key.SECONDARY,
}

# 帮助面板（T 切换）
HELP_LINES = [
    "[CONTROLS]",
    "W A S D / arrows  move",
    "E  talk / plant / harvest",
    "I  inventory",
    "P  pause / resume",
    "Esc  close dialogue, trade, inventory",
    "Click / Enter  next dialogue line",
    "T  toggle this help",
    "",
    "[GOAL]",
    "Buy seeds from the merchant,",
    "grow crops, sell them to the farmer,",
    "then buy the SILVER TROPHY.",
]
