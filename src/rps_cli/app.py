"""
应用程序主类
Application Main Class
"""
from enum import Enum
from typing import Optional
import yaml
from .game import GameEngine, SessionController, Statistics
from .storage import StatisticsStore
from .ui import Console, Prompter
from .utils.config_loader import ConfigLoader, DEFAULT_CONFIG_PATH
from .utils.error_handler import ErrorHandler
from .utils.exceptions import (
    ConfigurationException, GameException, PromptCancelled, StatisticsStorageException
)
from .utils.logger import get_logger, setup_logger_from_config

logger = get_logger("RPS.App")


class Action(Enum):
    """命令行解析后的操作"""
    START = "start"    # 进入主菜单
    STATS = "stats"    # 显示统计后退出
    RESET = "reset"    # 确认后重置统计并退出
    PLAY = "play"      # 直接进行一回合

    def __str__(self):
        return self.value


class Application:
    """应用程序主类"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 stats_file: Optional[str] = None,
                 log_level: Optional[str] = None,
                 prompter: Optional[Prompter] = None,
                 console: Optional[Console] = None,
                 rng=None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径；为None时尝试默认路径，不存在则使用默认配置
            stats_file: 统计文件路径（覆盖配置）
            log_level: 日志级别（覆盖配置）
            prompter: 交互提示
            console: 控制台输出
            rng: 对手出拳随机源
        """
        self.config_path = config_path
        self.stats_file = stats_file
        self.log_level = log_level
        self.console = console or Console()
        self.prompter = prompter or Prompter()
        self.rng = rng
        self.error_handler = ErrorHandler(self.console)

        self.config = {}
        self.store: Optional[StatisticsStore] = None
        self.controller: Optional[SessionController] = None
        self.load_failed = False

    def initialize(self) -> bool:
        """
        加载配置、设置日志并创建游戏组件

        Returns:
            bool: 初始化是否成功
        """
        if not self._load_config():
            return False

        self._setup_logging()

        stats_file = self.stats_file or ConfigLoader.get_stats_file(self.config)
        self.store = StatisticsStore(stats_file)
        statistics = self._load_statistics()

        engine = GameEngine(self.store, rng=self.rng)
        self.controller = SessionController(
            engine=engine,
            store=self.store,
            prompter=self.prompter,
            console=self.console,
            statistics=statistics
        )
        logger.info(f"应用程序初始化完成，统计文件: {stats_file}")
        return True

    def _load_config(self) -> bool:
        """加载配置文件"""
        path = self.config_path or DEFAULT_CONFIG_PATH
        try:
            self.config = ConfigLoader.load_config(path)
        except FileNotFoundError:
            if self.config_path:
                self.error_handler.handle(
                    ConfigurationException(f"配置文件不存在: {path}"), "加载配置"
                )
                return False
            logger.debug(f"未找到默认配置文件，使用默认配置: {path}")
            self.config = {}
        except (yaml.YAMLError, OSError) as e:
            self.error_handler.handle(ConfigurationException(f"{path}: {e}"), "加载配置")
            return False
        return True

    def _setup_logging(self):
        logging_config = dict(ConfigLoader.get_logging_config(self.config))
        if self.log_level:
            logging_config['level'] = self.log_level
        setup_logger_from_config(logging_config)

    def _load_statistics(self) -> Statistics:
        """读取统计，读取失败时提示并使用全零统计"""
        try:
            return self.store.load()
        except StatisticsStorageException as e:
            self.error_handler.handle(e, "加载统计")
            self.load_failed = True
            return Statistics()

    def run(self, action: Action = Action.START, move: Optional[str] = None) -> int:
        """
        执行操作

        Args:
            action: 要执行的操作
            move: play 操作的预设出拳

        Returns:
            int: 退出码（0 正常；1 配置或统计读写失败）
        """
        if not self.initialize():
            return 1

        logger.info(f"执行操作: {action}")
        if action == Action.START:
            self.controller.run()
        elif action == Action.STATS:
            if not self.load_failed:
                self.controller.show_statistics()
        elif action == Action.RESET:
            try:
                self.controller.confirm_reset()
            except PromptCancelled:
                logger.info("用户取消重置确认")
                self.console.goodbye()
        elif action == Action.PLAY:
            self.controller.play_single(move)
        else:
            raise GameException(f"未知操作: {action!r}")

        return self.exit_code()

    def exit_code(self) -> int:
        """根据本次调用中是否出现统计读写失败返回退出码"""
        if self.load_failed:
            return 1
        if self.controller is not None and self.controller.persistence_failed:
            return 1
        return 0
