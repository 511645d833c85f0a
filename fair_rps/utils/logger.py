"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

# 所有模块日志记录器的父记录器名称
ROOT_LOGGER_NAME = "FairRPS"

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别，无法识别时返回WARNING
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    获取模块日志记录器（不添加处理器，消息传递给FairRPS父记录器）

    Args:
        name: 日志记录器名称，例如 "FairRPS.GameRules"
    """
    return logging.getLogger(name)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_file: Optional[str] = None,
    level: int = logging.WARNING,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    标准输出保留给游戏界面，控制台日志写入stderr。
    重复调用时按新参数重建处理器；新处理器创建失败时保留原有处理器。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器

    Raises:
        OSError: 日志文件无法创建
    """
    logger = logging.getLogger(name)

    if format_string is None:
        format_string = DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)
    handlers = []

    # 控制台处理器
    console_handler = logging.StreamHandler(sys.stderr)
    handlers.append(console_handler)

    # 文件处理器（如果指定）
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    # 替换旧处理器，避免重复输出
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    从配置字典设置日志记录器

    Args:
        config: 配置字典（包含level、file和format键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')
    format_string = config.get('format')

    return setup_logger(name=name, log_file=log_file, level=level, format_string=format_string)
