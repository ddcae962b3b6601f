"""
会话控制器
Session Controller - 主菜单、游戏循环与统计管理
"""
from typing import Optional
from .state_machine import SessionState, SessionStateMachine
from .game_logic import GameEngine, RoundResult, Statistics
from .move_providers import interactive_move_provider, preset_move_provider
from ..utils.exceptions import GameException, PromptCancelled
from ..utils.logger import get_logger

logger = get_logger("RPS.SessionController")


class SessionController:
    """会话控制器类，以显式循环驱动会话状态机"""

    MENU_CHOICES = [
        ("▶️  Start New Game", "play"),
        ("📊 View Statistics", "stats"),
        ("🔄 Reset Statistics", "reset"),
        ("🚪 Quit", "quit"),
    ]

    MENU_TARGETS = {
        "play": SessionState.IN_GAME,
        "stats": SessionState.VIEWING_STATS,
        "reset": SessionState.RESETTING_STATS,
        "quit": SessionState.EXITING,
    }

    def __init__(self,
                 engine: GameEngine,
                 store,
                 prompter,
                 console,
                 statistics: Optional[Statistics] = None):
        """
        初始化会话控制器

        Args:
            engine: 游戏引擎
            store: 统计存储
            prompter: 交互提示
            console: 控制台输出
            statistics: 已加载的统计，默认全零
        """
        self.engine = engine
        self.store = store
        self.prompter = prompter
        self.console = console
        self.statistics = statistics if statistics is not None else Statistics()
        self._persistence_failed = False

        self.state_machine = SessionStateMachine(initial_state=SessionState.MAIN_MENU)
        self._state_handlers = {
            SessionState.MAIN_MENU: self._handle_main_menu,
            SessionState.IN_GAME: self._handle_in_game,
            SessionState.VIEWING_STATS: self._handle_viewing_stats,
            SessionState.RESETTING_STATS: self._handle_resetting_stats,
        }
        # 离开子界面返回主菜单前等待回车
        for state in (SessionState.IN_GAME, SessionState.VIEWING_STATS,
                      SessionState.RESETTING_STATS):
            self.state_machine.register_transition_handler(
                state, SessionState.MAIN_MENU, self.prompter.pause
            )

    @property
    def persistence_failed(self) -> bool:
        """本次会话是否有统计保存失败"""
        return self._persistence_failed

    def get_current_state(self) -> SessionState:
        return self.state_machine.get_current_state()

    def run(self) -> Statistics:
        """
        运行交互会话直到退出

        Returns:
            Statistics: 会话结束时的统计
        """
        logger.info("会话开始")
        while not self.state_machine.is_finished():
            try:
                handler = self._state_handlers[self.get_current_state()]
                self._transition(handler())
            except PromptCancelled:
                logger.info("用户取消，退出会话")
                self._transition(SessionState.EXITING)
                self.console.goodbye()

        logger.info(f"会话结束，统计: {self.statistics}")
        return self.statistics

    def _transition(self, new_state: SessionState):
        if not self.state_machine.transition_to(new_state):
            raise GameException(
                f"无效的状态转换: {self.get_current_state()} -> {new_state}",
                game_state=str(self.get_current_state())
            )

    def _handle_main_menu(self) -> SessionState:
        """处理主菜单"""
        self.console.welcome()
        choice = self.prompter.select("What would you like to do?", self.MENU_CHOICES)
        if choice == "quit":
            self.console.goodbye("Thanks for playing! Goodbye! 👋")
        return self.MENU_TARGETS[choice]

    def _handle_in_game(self) -> SessionState:
        """处理游戏循环：一直进行回合直到返回菜单或不再继续"""
        provider = interactive_move_provider(self.prompter, allow_back=True)
        while True:
            self.console.new_game()
            result = self.engine.play_round(self.statistics, provider)
            if result is None:
                return SessionState.MAIN_MENU

            self._apply_round(result)

            if not self.prompter.confirm("Would you like to play another round?", default=True):
                return SessionState.MAIN_MENU

    def _handle_viewing_stats(self) -> SessionState:
        """处理查看统计"""
        self.show_statistics()
        return SessionState.MAIN_MENU

    def _handle_resetting_stats(self) -> SessionState:
        """处理重置统计"""
        self.confirm_reset()
        return SessionState.MAIN_MENU

    def _apply_round(self, result: RoundResult):
        self.statistics = result.statistics
        self.console.show_round(result)
        if not result.saved:
            self._report_save_failure()

    def _report_save_failure(self):
        self._persistence_failed = True
        self.console.warning(f"Could not save statistics to {self.store.path}.")

    def show_statistics(self):
        """显示当前统计"""
        self.console.show_statistics(self.statistics)

    def confirm_reset(self) -> bool:
        """
        确认后重置并保存统计

        Returns:
            bool: 是否执行了重置

        Raises:
            PromptCancelled: 用户强制关闭确认提示
        """
        confirmed = self.prompter.confirm(
            "Are you sure you want to reset all statistics?", default=False
        )
        if not confirmed:
            logger.info("用户取消重置")
            self.console.info("Reset cancelled.")
            return False

        self.statistics = self.store.reset()
        if self.store.save(self.statistics):
            self.console.success("Statistics have been reset!")
        else:
            self._report_save_failure()
        logger.info("统计已重置")
        return True

    def play_single(self, move_text: Optional[str] = None) -> Optional[RoundResult]:
        """
        直接进行一回合（不进入主菜单）

        Args:
            move_text: 预设出拳，缺失或无效时交互选择

        Returns:
            Optional[RoundResult]: 回合结果；用户取消选择时为None
        """
        provider = preset_move_provider(move_text, self.prompter, self.console)
        try:
            result = self.engine.play_round(self.statistics, provider)
        except PromptCancelled:
            logger.info("用户取消出拳选择")
            self.console.info("Move selection cancelled.")
            return None

        self._apply_round(result)
        self.console.show_updated_statistics(self.statistics)
        return result
