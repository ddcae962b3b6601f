"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class RPSException(Exception):
    """游戏异常基类"""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GameException(RPSException):
    """游戏逻辑异常（调用方传入了非法参数等编程错误）"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state


class ConfigurationException(RPSException):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class StatisticsStorageException(RPSException):
    """统计文件读取异常（文件缺失或损坏不属于此类）"""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PromptCancelled(RPSException):
    """用户强制关闭了交互提示（Ctrl-C / EOF），不是错误"""
    def __init__(self, message: str = "Prompt cancelled by user"):
        super().__init__(message)
