"""
统计信息持久化
Statistics Store
"""
import contextlib
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Union
from ..game.game_logic.game_rules import Outcome
from ..game.game_logic.statistics import Statistics, record_outcome, reset_statistics
from ..utils.config_loader import DEFAULT_STATS_FILE
from ..utils.exceptions import StatisticsStorageException
from ..utils.logger import get_logger

logger = get_logger("RPS.StatisticsStore")


class StatisticsStore:
    """
    统计文件读写

    文件为JSON对象，只包含 wins / losses / ties / totalGames 四个字段，
    每次修改后整体覆盖写入。多个进程同时写入时以最后写入者为准，不加锁。
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_STATS_FILE):
        """
        初始化统计存储

        Args:
            path: 统计文件路径
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Statistics:
        """
        读取统计文件

        Returns:
            Statistics: 文件中的统计；文件不存在或内容损坏时返回全零记录

        Raises:
            StatisticsStorageException: 其他读取错误（如权限不足）
        """
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            logger.info(f"统计文件不存在，使用默认统计: {self._path}")
            return Statistics()
        except UnicodeDecodeError:
            logger.warning(f"统计文件编码错误，使用默认统计: {self._path}")
            return Statistics()
        except OSError as e:
            raise StatisticsStorageException(
                f"{self._path}: {e.strerror or e}", path=str(self._path)
            ) from e

        try:
            statistics = Statistics.from_dict(json.loads(text))
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError 是 ValueError 的子类；嵌套过深时抛出 RecursionError
            logger.warning(f"统计文件内容无效，使用默认统计: {self._path} ({e})")
            return Statistics()

        if not statistics.is_consistent():
            logger.warning(f"统计文件计数不一致: {statistics}")

        logger.info(f"成功加载统计: {statistics}")
        return statistics

    def save(self, statistics: Statistics) -> bool:
        """
        保存统计（整体覆盖）

        Args:
            statistics: 要保存的统计

        Returns:
            bool: 保存是否成功
        """
        content = json.dumps(statistics.to_dict(), indent=2) + "\n"
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            # mkstemp 创建的文件权限为0600，替换前恢复为原文件或umask决定的权限
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            logger.error(f"保存统计失败: {self._path}: {e}")
            return False
        finally:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

        logger.debug(f"成功保存统计: {self._path}")
        return True

    def _file_mode(self) -> int:
        """已有文件沿用其权限，新文件使用 0666 & ~umask"""
        try:
            return stat.S_IMODE(os.stat(self._path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @staticmethod
    def record(statistics: Statistics, outcome: Outcome) -> Statistics:
        """记录一个回合结果，返回新统计"""
        return record_outcome(statistics, outcome)

    @staticmethod
    def reset() -> Statistics:
        """返回全零统计，由调用方负责保存"""
        return reset_statistics()
