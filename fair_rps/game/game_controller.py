"""
游戏控制器
Game Controller - 控制台菜单循环，整合会话、状态机与帮助表
"""
import sys
from typing import Optional, Callable
from .state_machine import GameState, GameStateMachine
from .game_logic import GameSession, RoundResult
from .help_table import render_outcome_table
from ..utils.logger import get_logger

logger = get_logger("FairRPS.GameController")

SEPARATOR = "-" * 20
PROMPT = "Enter your move: "


class GameController:
    """游戏控制器类：读取玩家输入，驱动状态机直到判定或退出"""

    def __init__(self,
                 session: GameSession,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None,
                 error_func: Optional[Callable[[str], None]] = None,
                 table_format: str = "grid"):
        """
        初始化游戏控制器

        Args:
            session: 游戏会话（已生成摘要）
            input_func: 读取一行输入的函数，参数为提示文本（默认 input）
            output_func: 输出一段文本的函数（默认 print）
            error_func: 输出错误提示的函数（默认写入 stderr）
            table_format: 帮助表的 tabulate 格式
        """
        self.session = session
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.error_func = error_func or _print_error
        self.table_format = table_format
        self.last_result: Optional[RoundResult] = None

        self.state_machine = GameStateMachine(initial_state=GameState.AWAITING_INPUT)
        self._setup_state_handlers()

    def _setup_state_handlers(self):
        """设置状态处理函数"""
        self.state_machine.register_state_handler(GameState.SHOW_HELP, self._handle_show_help)
        self.state_machine.register_state_handler(GameState.RESOLVED, self._handle_resolved)
        self.state_machine.register_state_handler(GameState.QUIT, self._handle_quit)

    def run(self) -> GameState:
        """
        运行菜单循环

        Returns:
            GameState: 终止状态（RESOLVED 或 QUIT）
        """
        while not self.state_machine.is_finished():
            answer = self._prompt()
            self._handle_answer(answer)

            if self.state_machine.is_in_state(GameState.SHOW_HELP):
                self.state_machine.transition_to(GameState.AWAITING_INPUT)

        return self.state_machine.get_current_state()

    def render_menu(self) -> str:
        """菜单文本（摘要、招式列表、帮助与退出选项）"""
        lines = [f"HMAC: {self.session.digest_hex}", "Available moves:"]
        lines.extend(f"{index}. {name}" for index, name in self.session.move_set.indexed())
        lines.append("? - help")
        lines.append("0. Quit")
        return "\n".join(lines)

    def _prompt(self) -> Optional[str]:
        self.output_func(self.render_menu())
        try:
            return self.input_func(PROMPT)
        except (EOFError, KeyboardInterrupt):
            # 输入结束或中断按退出处理
            logger.info("输入结束，退出游戏")
            return None

    def _handle_answer(self, answer: Optional[str]):
        if answer is None:
            self.state_machine.transition_to(GameState.QUIT)
            return

        answer = answer.strip()
        if answer == "?":
            self.state_machine.transition_to(GameState.SHOW_HELP)
            return
        if answer == "0":
            self.state_machine.transition_to(GameState.QUIT)
            return

        index = self._parse_move_index(answer)
        if index is None:
            logger.debug(f"无效输入: {answer!r}")
            self.error_func(f"{SEPARATOR}\nInvalid input. Please try again.\n{SEPARATOR}")
            self.state_machine.transition_to(GameState.AWAITING_INPUT)
            return

        self.last_result = self.session.play(index)
        self.state_machine.transition_to(GameState.RESOLVED)

    def _parse_move_index(self, answer: str) -> Optional[int]:
        try:
            index = int(answer)
        except ValueError:
            return None
        if not self.session.move_set.is_valid_index(index):
            return None
        return index

    def _handle_show_help(self):
        """显示胜负表（不涉及密钥）"""
        table = render_outcome_table(self.session.move_set, self.table_format)
        self.output_func(f"{SEPARATOR}\n{table}\n{SEPARATOR}")

    def _handle_resolved(self):
        """显示回合结果并公开密钥"""
        result = self.last_result
        self.output_func(
            f"{SEPARATOR}\n"
            f"Your move: {result.human_move}\n"
            f"Computer move: {result.computer_move}\n"
            f"You {result.verdict.value}\n"
            f"HMAC key: {result.key_hex}\n"
            f"{SEPARATOR}"
        )

    def _handle_quit(self):
        self.output_func(f"{SEPARATOR}\nGoodbye!\n{SEPARATOR}")


def _print_error(text: str):
    print(text, file=sys.stderr)
