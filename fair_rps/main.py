"""
公平石头剪刀布游戏主程序入口
Fair Rock Paper Scissors Game Main Entry
"""
import sys
import argparse
from typing import Optional, Sequence

from .app import Application
from .utils.logger import get_logger

logger = get_logger("FairRPS.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog='fair-rps',
        description='Provably fair rock-paper-scissors with any odd number of moves',
        epilog='Example: fair-rps Rock Paper Scissors Lizard Spock'
    )
    parser.add_argument(
        'moves',
        nargs='*',
        help='招式名称（奇数个，至少3个，忽略大小写后不可重复）'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='日志级别（覆盖配置文件）'
    )
    return parser


def main(argv: Optional[Sequence[str]] = None):
    """主函数"""
    args = build_parser().parse_args(argv)

    app = Application(config_path=args.config, log_level=args.log_level)

    try:
        exit_code = app.run(args.moves)
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        exit_code = 0
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        exit_code = 1

    logger.info("程序退出")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
