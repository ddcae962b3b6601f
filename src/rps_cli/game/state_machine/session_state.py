"""
会话状态枚举
Session State Enumeration
"""
from enum import Enum, auto


class SessionState(Enum):
    """会话状态枚举"""
    MAIN_MENU = auto()         # 主菜单
    IN_GAME = auto()           # 游戏中（可连续多回合）
    VIEWING_STATS = auto()     # 查看统计
    RESETTING_STATS = auto()   # 等待确认重置统计
    EXITING = auto()           # 退出（终止状态）

    def __str__(self):
        return self.name
