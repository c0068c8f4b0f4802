"""
输入快照 - 每帧的按键/鼠标状态
移动键为电平触发（按住期间为 True），其余按键与鼠标为边沿触发，
只在 松开->按下 的瞬间置位，由消费者读取后清除

同一逻辑键可绑定多个物理键（W 与 ↑），按住状态按物理键记录：
只要还有一个物理键按着，逻辑键就算按住
"""

import logging
from typing import Dict, Hashable, Optional, Set

import pygame

from .controls import Key, MOVEMENT_KEYS, KEY_BINDINGS

logger = logging.getLogger(__name__)


class InputSnapshot:
    """单写单读：事件写入，逻辑 tick 读取，后到者覆盖"""

    def __init__(self):
        # 逻辑键 -> 当前按住的物理键
        self._held: Dict[Key, Set[Hashable]] = {k: set() for k in Key}
        self._edges: Set[Key] = set()
        self.clicked = False
        self.mouse_pos = (0, 0)

    def key_down(self, key: Key, code: Optional[Hashable] = None, edge: bool = True) -> None:
        """code 为物理键码，直接驱动逻辑键时省略"""
        codes = self._held[key]
        code = key if code is None else code
        if code in codes:
            return  # 按住不重复触发
        was_held = bool(codes)
        codes.add(code)
        if edge and not was_held and key not in MOVEMENT_KEYS:
            self._edges.add(key)
            logger.debug("key pressed: %s", key.value)

    def key_up(self, key: Key, code: Optional[Hashable] = None) -> None:
        self._held[key].discard(key if code is None else code)

    def mouse_down(self, pos=(0, 0)) -> None:
        self.mouse_pos = pos
        self.clicked = True

    def is_held(self, key: Key) -> bool:
        return bool(self._held[key])

    @property
    def movement_keys_held(self) -> int:
        """同时按住的移动物理键数量"""
        return sum(len(self._held[k]) for k in MOVEMENT_KEYS)

    def pressed(self, key: Key) -> bool:
        """本 tick 是否有该键的按下沿（不清除）"""
        return key in self._edges

    def consume(self, key: Key) -> bool:
        """读取并清除按下沿"""
        if key in self._edges:
            self._edges.discard(key)
            return True
        return False

    def consume_click(self) -> bool:
        if self.clicked:
            self.clicked = False
            return True
        return False

    def end_tick(self) -> None:
        """tick 结束：未被消费的按下沿作废，保证每次按键只被一个 tick 看到"""
        self._edges.clear()
        self.clicked = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """处理 pygame 事件，返回 True 表示已消费"""
        if event.type == pygame.KEYDOWN:
            key = KEY_BINDINGS.get(event.key)
            if key is not None:
                self.key_down(key, event.key)
                return True
        elif event.type == pygame.KEYUP:
            key = KEY_BINDINGS.get(event.key)
            if key is not None:
                self.key_up(key, event.key)
                return True
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_down(event.pos)
            return True
        return False

    def track_held(self, event: pygame.event.Event) -> None:
        """弹窗打开期间只记录按住/松开，不产生按下沿"""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        key = KEY_BINDINGS.get(event.key)
        if key is None:
            return
        if event.type == pygame.KEYDOWN:
            self.key_down(key, event.key, edge=False)
        else:
            self.key_up(key, event.key)
