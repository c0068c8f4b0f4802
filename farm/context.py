"""
游戏上下文 - 持有玩家、NPC、作物地块、背包与当前游戏状态
逻辑函数（logic.py）显式接收上下文，不使用全局状态
"""

from typing import List, Optional

from .api import GameState
from .crops import CropPlot
from .input import InputSnapshot
from .inventory import Inventory
from .notices import NoticeLog
from .npc import Npc, make_merchant, make_farmer
from .player import Player
from .prompts import Prompt
from .world import CROP_PLOT_ZONE


class GameContext:
    """一局游戏的全部可变状态"""

    def __init__(self, inventory: Optional[Inventory] = None):
        self.player = Player()
        self.merchant = make_merchant()
        self.farmer = make_farmer()
        self.plot = CropPlot()
        self.inventory = inventory if inventory is not None else Inventory()
        self.input = InputSnapshot()
        self.notices = NoticeLog()

        self.state = GameState.PLAY
        self.active_npc: Optional[Npc] = None
        self.click_count = 0
        self.pending: Optional[Prompt] = None  # 等待外部回答的弹窗
        self.won = False
        self.show_help = False

    @property
    def npcs(self) -> List[Npc]:
        return [self.merchant, self.farmer]

    @property
    def awaiting_prompt(self) -> bool:
        return self.pending is not None

    @property
    def dialogue(self) -> str:
        """当前对话内容"""
        return self.active_npc.line if self.active_npc else ""

    def beside(self, npc: Npc) -> bool:
        return npc.zone.contains(self.player.x, self.player.y)

    def beside_plot(self) -> bool:
        return CROP_PLOT_ZONE.contains(self.player.x, self.player.y)

    def entities(self) -> list:
        """绘制顺序：商人、农夫、地块、玩家"""
        return [self.merchant, self.farmer, self.plot, self.player]
