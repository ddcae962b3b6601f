"""
出拳枚举类型
Move Enumeration
"""
from enum import Enum
from typing import Optional


class Move(Enum):
    """出拳类型枚举"""
    ROCK = "rock"          # 石头
    PAPER = "paper"        # 布
    SCISSORS = "scissors"  # 剪刀

    def __str__(self):
        return self.value

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @property
    def label(self) -> str:
        """菜单显示名，如 "Rock" """
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["Move"]:
        """
        从字符串创建出拳枚举

        Args:
            value: 出拳字符串（rock, paper, scissors），忽略大小写和首尾空白

        Returns:
            Optional[Move]: 出拳枚举值，无法识别时返回None
        """
        if not value:
            return None
        value_lower = value.strip().lower()
        for move in cls:
            if move.value == value_lower:
                return move
        return None


_EMOJI = {
    Move.ROCK: "🪨",
    Move.PAPER: "📄",
    Move.SCISSORS: "✂️",
}
