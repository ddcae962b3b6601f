"""
游戏规则实现
Game Rules Implementation
"""
from enum import Enum
from .move import Move
from ...utils.exceptions import GameException
from ...utils.logger import get_logger

logger = get_logger("RPS.GameRules")


class Outcome(Enum):
    """回合结果枚举（玩家视角）"""
    WIN = "win"      # 玩家获胜
    LOSS = "loss"    # 玩家失败
    TIE = "tie"      # 平局

    def __str__(self):
        return self.value


class GameRules:
    """游戏规则类"""

    # 胜负规则：key胜value
    WIN_RULES = {
        Move.ROCK: Move.SCISSORS,      # 石头胜剪刀
        Move.PAPER: Move.ROCK,         # 布胜石头
        Move.SCISSORS: Move.PAPER      # 剪刀胜布
    }

    @staticmethod
    def judge(player_move: Move, opponent_move: Move) -> Outcome:
        """
        判断回合结果

        Args:
            player_move: 玩家出拳
            opponent_move: 对手出拳

        Returns:
            Outcome: 玩家视角的结果

        Raises:
            GameException: 传入了非Move值
        """
        if not isinstance(player_move, Move) or not isinstance(opponent_move, Move):
            raise GameException(f"无效出拳: 玩家={player_move!r}, 对手={opponent_move!r}")

        # 平局
        if player_move == opponent_move:
            logger.debug(f"平局: {player_move}")
            return Outcome.TIE

        # 判断胜负
        if GameRules.beats(player_move) == opponent_move:
            logger.debug(f"玩家获胜: {player_move} 胜 {opponent_move}")
            return Outcome.WIN

        logger.debug(f"对手获胜: {opponent_move} 胜 {player_move}")
        return Outcome.LOSS

    @staticmethod
    def beats(move: Move) -> Move:
        """获取会被指定出拳战胜的出拳"""
        return GameRules.WIN_RULES[move]

    @staticmethod
    def random_move(rng) -> Move:
        """
        均匀随机选择对手出拳

        Args:
            rng: 提供 choice() 的随机源，如 random.Random

        Returns:
            Move: 随机出拳
        """
        return rng.choice(list(Move))
