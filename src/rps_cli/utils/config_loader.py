"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from pathlib import Path
from typing import Dict, Any
from .logger import get_logger

logger = get_logger("RPS.ConfigLoader")

DEFAULT_CONFIG_PATH = "config/config.yaml"
DEFAULT_STATS_FILE = "./game-stats.json"


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise yaml.YAMLError(f"配置文件顶层必须是映射: {config_path}")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def get_statistics_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取统计存储配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 统计存储配置字典
        """
        return config.get('statistics') or {}

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging') or {}

    @staticmethod
    def get_stats_file(config: Dict[str, Any]) -> str:
        """获取统计文件路径，未配置时使用默认路径"""
        return ConfigLoader.get_statistics_config(config).get('file') or DEFAULT_STATS_FILE
