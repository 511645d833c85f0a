"""
测试公共配置
Shared Test Fixtures
"""
import logging
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fair_rps.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_fair_rps_logger():
    """每个测试后移除处理器，避免持有已关闭的捕获流"""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class ScriptedConsole:
    """按顺序提供输入行并记录所有输出的假控制台"""

    def __init__(self, lines):
        self._lines = iter(lines)
        self.prompts = []
        self.outputs = []
        self.errors = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError

    def print(self, text: str = ""):
        self.outputs.append(text)

    def error(self, text: str = ""):
        self.errors.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.outputs)


@pytest.fixture
def console_factory():
    return ScriptedConsole
