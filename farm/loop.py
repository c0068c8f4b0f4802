"""
主循环计时 - 固定步长累加器
每次 poll() 累加真实耗时；累计超过一帧间隔时执行一次更新+渲染，
并只减去一个间隔（不清零，慢机器上可追帧）。另有每秒一次的报告计时，
用于存档与帧率统计
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from .api import FPS


@dataclass
class LoopStep:
    tick: bool = False
    # 每秒一次：过去一秒内的帧数，否则 None
    report: Optional[int] = None


class FixedStepLoop:
    """与渲染解耦的固定步长节拍器"""

    def __init__(self, fps: int = FPS, report_interval: float = 1.0,
                 clock: Callable[[], float] = time.perf_counter):
        self.interval = 1.0 / fps
        self.report_interval = report_interval
        self._clock = clock
        self._last = clock()
        self._delta = 0.0
        self._timer = 0.0
        self._frames = 0

    def now_ms(self) -> int:
        return int(self._clock() * 1000)

    def poll(self) -> LoopStep:
        now = self._clock()
        elapsed = now - self._last
        self._last = now
        self._delta += elapsed / self.interval
        self._timer += elapsed

        step = LoopStep()
        if self._delta >= 1:
            step.tick = True
            self._frames += 1
            self._delta -= 1

        if self._timer >= self.report_interval:
            step.report = self._frames
            self._frames = 0
            self._timer = 0.0
        return step
