"""
玩家出拳来源
Player Move Providers
"""
from typing import Optional
from .game_logic.game_engine import MoveProvider
from .game_logic.move import Move
from ..utils.logger import get_logger

logger = get_logger("RPS.MoveProviders")

BACK_TO_MENU = "back"


def move_choices(allow_back: bool = True) -> list:
    """出拳选择菜单项"""
    choices = [(f"{move.emoji} {move.label}", move) for move in Move]
    if allow_back:
        choices.append(("↩️  Back to Menu", BACK_TO_MENU))
    return choices


def interactive_move_provider(prompter, allow_back: bool = True) -> MoveProvider:
    """
    创建交互式出拳来源

    Args:
        prompter: 交互提示
        allow_back: 是否提供"返回菜单"选项（选中时返回None）
    """
    def provide() -> Optional[Move]:
        choice = prompter.select("Choose your move:", move_choices(allow_back))
        if choice == BACK_TO_MENU:
            return None
        return choice

    return provide


def preset_move_provider(move_text: Optional[str], prompter, console=None) -> MoveProvider:
    """
    创建预设出拳来源

    预设值有效时直接使用；缺失或无效时改为交互询问（不提供返回选项）。

    Args:
        move_text: 命令行传入的出拳字符串
        prompter: 交互提示
        console: 用于提示无效输入的控制台（可选）
    """
    fallback = interactive_move_provider(prompter, allow_back=False)

    def provide() -> Optional[Move]:
        move = Move.from_string(move_text)
        if move is not None:
            return move
        if move_text and move_text.strip():
            logger.info(f"无效的预设出拳: {move_text!r}，改为交互选择")
            if console is not None:
                console.warning(f"'{move_text}' is not a valid move.")
        return fallback()

    return provide
