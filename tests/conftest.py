"""
测试公共工具
Shared Test Fixtures
"""
from typing import Iterable, List

import pytest

from rps_cli.game import GameEngine, Move
from rps_cli.storage import StatisticsStore
from rps_cli.ui import Console, Prompter


class ScriptedInput:
    """
    按顺序返回预设输入的 input() 替身

    条目为异常类或实例时抛出；输入用完时抛出 EOFError（等同用户关闭输入）。
    """

    def __init__(self, answers: Iterable):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError()
        answer = self.answers.pop(0)
        if isinstance(answer, type) and issubclass(answer, BaseException):
            raise answer()
        if isinstance(answer, BaseException):
            raise answer
        return answer


class SequenceRng:
    """按顺序给出对手出拳的随机源替身"""

    def __init__(self, moves: Iterable[Move]):
        self.moves = list(moves)
        self.calls = 0

    def choice(self, seq):
        assert list(seq) == list(Move)
        move = self.moves[self.calls % len(self.moves)]
        self.calls += 1
        return move


class OutputRecorder:
    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, text: str = ""):
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def output():
    return OutputRecorder()


@pytest.fixture
def console(output):
    return Console(write=output)


@pytest.fixture
def stats_path(tmp_path):
    return tmp_path / "game-stats.json"


@pytest.fixture
def store(stats_path):
    return StatisticsStore(stats_path)


@pytest.fixture
def make_prompter(output):
    """根据预设输入创建 Prompter"""
    def factory(answers) -> Prompter:
        return Prompter(input_func=ScriptedInput(answers), output=output)
    return factory


@pytest.fixture
def make_engine(store):
    """创建对手出拳固定的 GameEngine"""
    def factory(moves, engine_store=None) -> GameEngine:
        return GameEngine(engine_store or store, rng=SequenceRng(moves))
    return factory


@pytest.fixture
def failing_store(tmp_path):
    """保存总是失败的统计存储（父路径是普通文件）"""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    return StatisticsStore(blocker / "game-stats.json")
