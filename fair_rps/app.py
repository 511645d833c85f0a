"""
应用程序主类
Application Main Class
"""
import sys
from typing import Optional, Sequence, Callable, TextIO
from .game import GameController, GameSession, MoveSet, CommitmentBase
from .game.state_machine import GameState
from .utils.logger import get_logger, setup_logger_from_config
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import (
    ConfigurationException, MoveSetException, RandomnessSourceException
)

logger = get_logger("FairRPS.App")

EXIT_OK = 0
EXIT_CONFIGURATION_ERROR = 1
EXIT_RANDOMNESS_ERROR = 2


class Application:
    """应用程序主类：加载配置、校验招式、创建会话并运行菜单循环"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None,
                 error_stream: Optional[TextIO] = None,
                 commitment: Optional[CommitmentBase] = None,
                 computer_index: Optional[int] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径（默认 config/config.yaml）
            log_level: 覆盖配置中的日志级别
            input_func: 读取玩家输入的函数
            output_func: 输出游戏文本的函数
            error_stream: 错误信息输出流（默认 stderr）
            commitment: 承诺方案（默认 HMAC-SHA3-256）
            computer_index: 指定电脑招式编号（测试用）
        """
        self.config_path = config_path
        self.log_level = log_level
        self.input_func = input_func
        self.output_func = output_func
        self.error_stream = error_stream
        self.commitment = commitment
        self.computer_index = computer_index

        self.config: dict = {}
        self.session: Optional[GameSession] = None
        self.game_controller: Optional[GameController] = None

    def _report(self, message: str):
        print(message, file=self.error_stream or sys.stderr)

    def initialize(self):
        """
        加载配置并设置日志

        Raises:
            ConfigurationException: 配置文件无效
        """
        self.config = ConfigLoader.load_with_defaults(self.config_path)

        logging_config = dict(ConfigLoader.get_logging_config(self.config))
        if self.log_level:
            logging_config['level'] = self.log_level
        try:
            setup_logger_from_config(logging_config)
        except OSError as e:
            raise ConfigurationException(
                f"Cannot open log file {logging_config.get('file')}: {e}", config_key='logging'
            ) from e

        logger.info(f"配置加载完成，日志级别: {logging_config.get('level', 'WARNING')}")

    def run(self, moves: Sequence[str]) -> int:
        """
        运行一局游戏

        Args:
            moves: 命令行提供的招式名称

        Returns:
            int: 进程退出码
        """
        try:
            self.initialize()
            move_set = MoveSet.from_arguments(moves)
        except MoveSetException as e:
            global_error_handler.handle(e, "参数校验")
            self._report(e.message)
            return EXIT_CONFIGURATION_ERROR
        except ConfigurationException as e:
            global_error_handler.handle(e, "加载配置")
            self._report(f"Configuration error: {e.message}")
            return EXIT_CONFIGURATION_ERROR

        try:
            self.session = GameSession(
                move_set,
                commitment=self.commitment,
                computer_index=self.computer_index
            )
        except RandomnessSourceException as e:
            global_error_handler.handle(e, "创建会话")
            self._report(f"Fatal error: {e.message}")
            return EXIT_RANDOMNESS_ERROR

        game_config = ConfigLoader.get_game_config(self.config)
        self.game_controller = GameController(
            self.session,
            input_func=self.input_func,
            output_func=self.output_func,
            error_func=self._report,
            table_format=game_config.get('table_format', 'grid')
        )

        final_state = self.game_controller.run()
        logger.info(f"游戏结束，最终状态: {final_state}")
        if final_state == GameState.RESOLVED:
            result = self.game_controller.last_result
            logger.debug(f"回合记录: {result.to_dict()}")
        return EXIT_OK
