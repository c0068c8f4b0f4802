"""
提示条 - 屏幕角落显示的非致命提示（如存档失败），不打断游戏
只在主循环线程中读写
"""

from typing import List, Tuple


class NoticeLog:
    """提示缓冲，每条提示带过期时间"""

    def __init__(self, max_lines: int = 5, lifetime_ms: int = 4000):
        self._lines: List[Tuple[str, int]] = []
        self._max_lines = max_lines
        self._lifetime_ms = lifetime_ms

    def post(self, text: str, now_ms: int) -> None:
        """追加一条提示；同一内容只保留最新一条"""
        self._lines = [(t, exp) for t, exp in self._lines if t != text]
        self._lines.append((text, now_ms + self._lifetime_ms))
        del self._lines[:-self._max_lines]

    def visible(self, now_ms: int) -> List[str]:
        """当前未过期的提示"""
        self._lines = [(t, exp) for t, exp in self._lines if exp > now_ms]
        return [t for t, _ in self._lines]

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
