"""
弹窗请求 - 游戏逻辑向外部界面发出的 确认/选择/通知 请求
请求挂起期间模拟暂停，界面通过 logic.answer_prompt() 回传结果：
    CONFIRM -> True / False
    CHOICE  -> 选中的字符串，取消为 None
    NOTICE  -> 任意值（仅表示已读）
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .trade import Offer


class PromptKind(Enum):
    CONFIRM = "confirm"
    CHOICE = "choice"
    NOTICE = "notice"


class PromptPurpose(Enum):
    """回答后由谁接手"""
    HARVEST = "harvest"
    PLANT = "plant"
    TRADE_PICK = "trade_pick"
    TRADE_CONFIRM = "trade_confirm"
    NOTICE = "notice"


@dataclass
class Prompt:
    kind: PromptKind
    purpose: PromptPurpose
    title: str
    message: str
    options: List[str] = field(default_factory=list)
    error: bool = False
    offer: Optional[Offer] = None  # TRADE_CONFIRM 时待确认的报价


def confirm(purpose: PromptPurpose, title: str, message: str, offer: Optional[Offer] = None,
            options: Optional[List[str]] = None) -> Prompt:
    return Prompt(PromptKind.CONFIRM, purpose, title, message, options or ["Yes", "No"], offer=offer)


def choice(purpose: PromptPurpose, title: str, message: str, options: List[str]) -> Prompt:
    return Prompt(PromptKind.CHOICE, purpose, title, message, list(options))


def notice(message: str, title: str = "Message", error: bool = False) -> Prompt:
    return Prompt(PromptKind.NOTICE, PromptPurpose.NOTICE, title, message, ["OK"], error=error)
