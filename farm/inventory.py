"""
背包 - 物品计数、原子交换与存档行格式
存档格式：7 个非负整数，以 ", " 分隔，顺序同 Item 定义
"""

from typing import Dict, List, Mapping, Optional

from .api import Item


DEFAULT_COUNTS = (20, 0, 0, 0, 0, 0, 0)
SEPARATOR = ", "


class Inventory:
    """物品 -> 数量，任何数量都不会小于 0"""

    def __init__(self, counts: Optional[Mapping[Item, int]] = None):
        self._counts: Dict[Item, int] = dict(zip(Item, DEFAULT_COUNTS))
        if counts:
            for item, amount in counts.items():
                if amount < 0:
                    raise ValueError(f"negative count for {item.display_name}: {amount}")
                self._counts[item] = amount

    def __getitem__(self, item: Item) -> int:
        return self._counts[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"Inventory({self.as_list()})"

    def items(self):
        return [(item, self._counts[item]) for item in Item]

    def as_list(self) -> List[int]:
        return [self._counts[item] for item in Item]

    def add(self, item: Item, amount: int) -> None:
        if amount < 0:
            raise ValueError("use exchange() to remove items")
        self._counts[item] += amount

    def lacking(self, cost: Mapping[Item, int]) -> Optional[Item]:
        """返回第一个不足的物品，足够则 None"""
        for item, amount in cost.items():
            if self._counts[item] < amount:
                return item
        return None

    def can_afford(self, cost: Mapping[Item, int]) -> bool:
        return self.lacking(cost) is None

    def exchange(self, cost: Mapping[Item, int], gain: Mapping[Item, int]) -> Optional[Item]:
        """
        扣除 cost 并加入 gain，要么全部生效要么不变。
        成功返回 None，失败返回不足的物品。
        """
        short = self.lacking(cost)
        if short is not None:
            return short
        for item, amount in cost.items():
            self._counts[item] -= amount
        for item, amount in gain.items():
            self._counts[item] += amount
        return None

    def to_line(self) -> str:
        return SEPARATOR.join(str(n) for n in self.as_list())

    @classmethod
    def from_line(cls, line: str) -> "Inventory":
        """解析存档行，按位置赋值；格式不对抛 ValueError"""
        tokens = line.strip().split(SEPARATOR)
        items = list(Item)
        if len(tokens) > len(items):
            raise ValueError(f"expected at most {len(items)} values, got {len(tokens)}")
        counts = {}
        for item, token in zip(items, tokens):
            counts[item] = int(token)
        return cls(counts)
