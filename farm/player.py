"""
玩家 - 位置、朝向、移动与行走动画
"""

from typing import Tuple

from .api import Direction, TILE_SIZE
from .controls import Key
from .input import InputSnapshot
from .world import PLAYER_START, clamp_to_field


BASE_SPEED = 4
# 动画帧计数超过该值时切换行走帧
SPRITE_SWITCH_TICKS = 10
# 同时按住 3 个移动键视为冲突，本 tick 停止移动
CONFLICT_KEY_COUNT = 3

_STEPS = (
    (Key.UP, Direction.UP, 0, -1),
    (Key.DOWN, Direction.DOWN, 0, 1),
    (Key.LEFT, Direction.LEFT, -1, 0),
    (Key.RIGHT, Direction.RIGHT, 1, 0),
)


class Player:
    """玩家角色"""

    size = TILE_SIZE

    def __init__(self, x: int = PLAYER_START[0], y: int = PLAYER_START[1]):
        self.x = x
        self.y = y
        self.speed = BASE_SPEED
        self.facing = Direction.DOWN
        self.moving = False
        self.sprite_num = 1
        self._sprite_counter = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def frame(self) -> int:
        """静止时固定第 1 帧"""
        return self.sprite_num if self.moving else 1

    @property
    def state_label(self) -> str:
        """down / idle_down 等"""
        if self.moving:
            return self.facing.value
        return f"idle_{self.facing.value}"

    def update(self, keys: InputSnapshot) -> None:
        """每 tick 根据按键移动，并推进动画"""
        if keys.movement_keys_held == CONFLICT_KEY_COUNT:
            self.speed = 0
        else:
            self.speed = BASE_SPEED

        moving = False
        for key, direction, dx, dy in _STEPS:
            if not keys.is_held(key):
                continue
            self.facing = direction
            if self.speed > 0:
                self.x, self.y = clamp_to_field(self.x + dx * self.speed, self.y + dy * self.speed)
                moving = True
        self.moving = moving

        self._sprite_counter += 1
        if self._sprite_counter > SPRITE_SWITCH_TICKS:
            self.sprite_num = 2 if self.sprite_num == 1 else 1
            self._sprite_counter = 0

    def sprite_key(self) -> str:
        return f"player/boy_{self.facing.value}_{self.frame}"
