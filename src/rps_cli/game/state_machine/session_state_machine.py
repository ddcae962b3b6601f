"""
会话状态机
Session State Machine
"""
from typing import Optional, Callable, Dict, List
from .session_state import SessionState
from ...utils.logger import get_logger

logger = get_logger("RPS.SessionStateMachine")


class SessionStateMachine:
    """会话状态机类"""

    # 状态转换规则，任何交互状态都可能因用户强制关闭而直接退出
    VALID_TRANSITIONS: Dict[SessionState, List[SessionState]] = {
        SessionState.MAIN_MENU: [SessionState.IN_GAME, SessionState.VIEWING_STATS,
                                 SessionState.RESETTING_STATS, SessionState.EXITING],
        SessionState.IN_GAME: [SessionState.MAIN_MENU, SessionState.EXITING],
        SessionState.VIEWING_STATS: [SessionState.MAIN_MENU, SessionState.EXITING],
        SessionState.RESETTING_STATS: [SessionState.MAIN_MENU, SessionState.EXITING],
        SessionState.EXITING: []
    }

    def __init__(self, initial_state: SessionState = SessionState.MAIN_MENU):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[SessionState] = None
        self.transition_handlers: Dict[tuple, Callable] = {}

        logger.info(f"会话状态机初始化，初始状态: {self.current_state}")

    def register_transition_handler(self, from_state: SessionState, to_state: SessionState,
                                    handler: Callable):
        """
        注册状态转换处理函数

        Args:
            from_state: 源状态
            to_state: 目标状态
            handler: 处理函数
        """
        key = (from_state, to_state)
        self.transition_handlers[key] = handler
        logger.debug(f"注册转换处理函数: {from_state} -> {to_state}")

    def transition_to(self, new_state: SessionState) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功
        """
        if new_state not in self.VALID_TRANSITIONS.get(self.current_state, []):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        old_state = self.current_state
        self.previous_state = old_state
        self.current_state = new_state

        logger.info(f"状态转换: {old_state} -> {new_state}")

        handler = self.transition_handlers.get((old_state, new_state))
        if handler is not None:
            handler()

        return True

    def get_current_state(self) -> SessionState:
        """获取当前状态"""
        return self.current_state

    def get_previous_state(self) -> Optional[SessionState]:
        """获取上一个状态"""
        return self.previous_state

    def can_transition_to(self, state: SessionState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def is_in_state(self, state: SessionState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state

    def is_finished(self) -> bool:
        """是否已进入终止状态"""
        return self.current_state == SessionState.EXITING
