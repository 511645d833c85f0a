"""
配置加载工具模块
Configuration Loader Utility
"""
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import get_logger

logger = get_logger("FairRPS.ConfigLoader")

# 默认配置文件路径（项目根目录下的 config/config.yaml）
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
    'game': {
        'table_format': 'grid',
    },
}


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
            ConfigurationException: 文件不存在、无法解析或顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationException(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"Invalid YAML in {config_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"读取配置文件失败: {e}")
            raise ConfigurationException(f"Cannot read {config_path}: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(
                f"Configuration root must be a mapping: {config_path}"
            )

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def load_with_defaults(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        加载配置并与默认配置合并

        未指定路径时使用默认路径，默认文件不存在则直接返回默认配置；
        显式指定的文件不存在视为配置错误。

        Args:
            config_path: 配置文件路径（可选）

        Returns:
            Dict[str, Any]: 合并后的配置字典
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                logger.debug("未找到默认配置文件，使用内置默认配置")
                return config
            config_path = str(DEFAULT_CONFIG_PATH)

        loaded = ConfigLoader.load_config(config_path)
        for section, values in loaded.items():
            if section not in config:
                config[section] = values
                continue
            if not isinstance(values, dict):
                raise ConfigurationException(
                    f"Section '{section}' must be a mapping", config_key=section
                )
            config[section].update(values)

        return config

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取游戏配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 游戏配置字典
        """
        return config.get('game', {})

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging', {})
