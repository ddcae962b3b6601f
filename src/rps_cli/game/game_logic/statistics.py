"""
游戏统计信息
Game Statistics
"""
from dataclasses import dataclass, replace
from typing import Any, Dict
from .game_rules import Outcome

# 统计字段 -> 持久化键名
FIELD_KEYS = {
    'wins': 'wins',
    'losses': 'losses',
    'ties': 'ties',
    'total_games': 'totalGames',
}

_OUTCOME_FIELDS = {
    Outcome.WIN: 'wins',
    Outcome.LOSS: 'losses',
    Outcome.TIE: 'ties',
}


@dataclass(frozen=True)
class Statistics:
    """累计统计信息（不可变，修改时返回新记录）"""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total_games: int = 0

    @property
    def win_rate(self) -> float:
        """
        获取玩家胜率

        Returns:
            float: 胜率百分比（0.0-100.0），无对局时为0.0
        """
        if self.total_games == 0:
            return 0.0
        return self.wins / self.total_games * 100

    def is_consistent(self) -> bool:
        """检查 total_games == wins + losses + ties"""
        return self.total_games == self.wins + self.losses + self.ties

    def to_dict(self) -> Dict[str, int]:
        """转换为持久化字典"""
        return {key: getattr(self, name) for name, key in FIELD_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> "Statistics":
        """
        从持久化字典创建统计记录

        Args:
            data: 已解析的JSON内容

        Returns:
            Statistics: 统计记录

        Raises:
            ValueError: 内容不是对象、缺少字段或字段不是非负整数
        """
        if not isinstance(data, dict):
            raise ValueError(f"统计内容必须是对象，实际为 {type(data).__name__}")

        values = {}
        for name, key in FIELD_KEYS.items():
            if key not in data:
                raise ValueError(f"缺少字段: {key}")
            value = data[key]
            # bool 是 int 的子类，需要单独排除
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"字段 {key} 必须是非负整数: {value!r}")
            values[name] = value
        return cls(**values)


def record_outcome(statistics: Statistics, outcome: Outcome) -> Statistics:
    """
    记录一个已完成回合的结果

    Args:
        statistics: 当前统计
        outcome: 回合结果

    Returns:
        Statistics: 对应计数和总局数各加1后的新记录
    """
    field_name = _OUTCOME_FIELDS[outcome]
    return replace(
        statistics,
        **{field_name: getattr(statistics, field_name) + 1},
        total_games=statistics.total_games + 1
    )


def reset_statistics() -> Statistics:
    """返回全零统计记录"""
    return Statistics()
