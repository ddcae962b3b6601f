"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional
from .exceptions import (
    GameException, ConfigurationException, StatisticsStorageException
)
from .logger import get_logger

logger = get_logger("RPS.ErrorHandler")


class ErrorHandler:
    """错误处理器类，负责记录异常并向用户显示提示"""

    def __init__(self, console=None):
        """
        初始化错误处理器

        Args:
            console: 用于显示警告/错误的控制台（可选）
        """
        self.console = console
        self.error_callbacks: dict = {}
        self.setup_default_handlers()

    def setup_default_handlers(self):
        """设置默认错误处理函数"""
        self.error_callbacks[StatisticsStorageException] = self._handle_storage_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error
        self.error_callbacks[GameException] = self._handle_game_error

    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            bool: 是否由专门的处理函数处理
        """
        error_msg = "异常发生"
        if context:
            error_msg += f" (上下文: {context})"
        error_msg += f": {exception}"
        logger.debug(error_msg, exc_info=exception)

        handler = None
        for exc_type, handler_func in self.error_callbacks.items():
            if isinstance(exception, exc_type):
                handler = handler_func
                break

        if handler is None:
            self._handle_generic_error(exception, context)
            return False

        handler(exception, context)
        return True

    def _show(self, level: str, text: str):
        if self.console is not None:
            getattr(self.console, level)(text)

    def _handle_storage_error(self, exception: StatisticsStorageException, context: Optional[str]):
        """处理统计文件读取错误"""
        logger.error(f"统计文件错误 [路径: {exception.path}]: {exception.message}")
        self._show('warning', f"Could not read statistics: {exception.message}")

    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]):
        """处理配置错误"""
        logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")
        self._show('error', f"Configuration error: {exception.message}")

    def _handle_game_error(self, exception: GameException, context: Optional[str]):
        """处理游戏逻辑错误"""
        logger.error(f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}")
        self._show('error', f"Error: {exception.message}")

    def _handle_generic_error(self, exception: Exception, context: Optional[str]):
        """处理通用错误"""
        logger.error(f"未处理的异常: {type(exception).__name__}: {exception}")
        logger.debug(''.join(traceback.format_exception(type(exception), exception, exception.__traceback__)))
        self._show('error', f"Error: {exception}")
