"""
会话状态机模块
Session State Machine Module
"""
from .session_state import SessionState
from .session_state_machine import SessionStateMachine

__all__ = ['SessionState', 'SessionStateMachine']
