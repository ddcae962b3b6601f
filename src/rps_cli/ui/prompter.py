"""
交互提示
Interactive Prompts
"""
from typing import Any, Callable, Optional, Sequence, Tuple
from ..utils.exceptions import PromptCancelled
from ..utils.logger import get_logger

logger = get_logger("RPS.Prompter")

Choice = Tuple[str, Any]


class Prompter:
    """
    基于标准输入的交互提示

    用户按 Ctrl-C 或输入结束（EOF）时抛出 PromptCancelled，
    调用方据此区分"用户取消"和"操作失败"。
    """

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """
        初始化交互提示

        Args:
            input_func: 读取一行输入的函数
            output: 输出一行文本的函数
        """
        self.input_func = input_func
        self.output = output

    def _ask(self, message: str) -> str:
        try:
            return self.input_func(message)
        except (KeyboardInterrupt, EOFError) as e:
            logger.info("用户强制关闭了提示")
            raise PromptCancelled() from e

    def select(self, message: str, choices: Sequence[Choice]) -> Any:
        """
        从列表中选择一项

        可以输入序号、显示名或选项值（忽略大小写），输入无效时重新询问。

        Args:
            message: 提示信息
            choices: (显示名, 值) 列表

        Returns:
            Any: 选中项的值

        Raises:
            PromptCancelled: 用户强制关闭提示
        """
        self.output(message)
        for index, (label, _) in enumerate(choices, start=1):
            self.output(f"  {index}) {label}")

        while True:
            answer = self._ask("> ").strip()
            value = self._match_choice(answer, choices)
            if value is not None:
                return value
            self.output(f"Please enter a number between 1 and {len(choices)}.")

    @staticmethod
    def _match_choice(answer: str, choices: Sequence[Choice]) -> Optional[Any]:
        if not answer:
            return None
        if answer.isdecimal():
            index = int(answer)
            if 1 <= index <= len(choices):
                return choices[index - 1][1]
            return None
        lowered = answer.lower()
        for label, value in choices:
            if lowered in (label.strip().lower(), str(value).lower()):
                return value
        return None

    def confirm(self, message: str, default: bool = False) -> bool:
        """
        是/否确认，直接回车使用默认值

        Raises:
            PromptCancelled: 用户强制关闭提示
        """
        suffix = "(Y/n)" if default else "(y/N)"
        while True:
            answer = self._ask(f"{message} {suffix} ").strip().lower()
            if not answer:
                return default
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False
            self.output("Please answer y or n.")

    def pause(self, message: str = "Press Enter to continue...") -> None:
        """等待用户按回车"""
        self._ask(message)
