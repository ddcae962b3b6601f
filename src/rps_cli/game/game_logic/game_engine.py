"""
游戏引擎
Game Engine - 执行单个回合并提交统计
"""
import random
from dataclasses import dataclass
from typing import Callable, Optional
from .move import Move
from .game_rules import GameRules, Outcome
from .statistics import Statistics
from ...utils.logger import get_logger

logger = get_logger("RPS.GameEngine")

# 返回玩家出拳；返回None表示玩家选择返回菜单（回合未进行）
MoveProvider = Callable[[], Optional[Move]]


@dataclass(frozen=True)
class RoundResult:
    """回合结果数据类"""
    player_move: Move
    opponent_move: Move
    outcome: Outcome
    statistics: Statistics   # 记录本回合后的统计
    saved: bool              # 统计是否成功保存

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'player_move': self.player_move.value,
            'opponent_move': self.opponent_move.value,
            'outcome': self.outcome.value,
            'statistics': self.statistics.to_dict(),
            'saved': self.saved
        }


class GameEngine:
    """游戏引擎类"""

    def __init__(self, store, rng=None):
        """
        初始化游戏引擎

        Args:
            store: 统计存储（提供 record / save）
            rng: 对手出拳随机源（提供 choice），默认不设种子的 random.Random
        """
        self.store = store
        self.rng = rng if rng is not None else random.Random()

    def play_round(self, statistics: Statistics,
                   move_provider: MoveProvider) -> Optional[RoundResult]:
        """
        进行一回合游戏

        move_provider 抛出的 PromptCancelled 原样向上传递，统计不变。

        Args:
            statistics: 当前统计
            move_provider: 获取玩家出拳的函数

        Returns:
            Optional[RoundResult]: 回合结果；玩家返回菜单时为None
        """
        player_move = move_provider()
        if player_move is None:
            logger.info("玩家返回菜单，回合未进行")
            return None

        opponent_move = GameRules.random_move(self.rng)
        outcome = GameRules.judge(player_move, opponent_move)

        # 提交统计：先记录再保存
        updated = self.store.record(statistics, outcome)
        saved = self.store.save(updated)
        if not saved:
            logger.warning("回合统计保存失败")

        result = RoundResult(
            player_move=player_move,
            opponent_move=opponent_move,
            outcome=outcome,
            statistics=updated,
            saved=saved
        )
        logger.info(f"回合结果: {result.to_dict()}")
        return result
