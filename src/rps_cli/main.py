"""
剪刀石头布命令行游戏入口
Rock Paper Scissors CLI Entry
"""
import argparse
import sys
from typing import List, Optional

from . import __version__
from .app import Action, Application
from .utils.logger import get_logger

logger = get_logger("RPS.Main")


def build_parser() -> argparse.ArgumentParser:
    """创建命令行解析器"""
    parser = argparse.ArgumentParser(
        prog='rps-cli',
        description='Rock-Paper-Scissors CLI Game'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to the YAML config file (default: config/config.yaml if present)'
    )
    parser.add_argument(
        '--stats-file',
        type=str,
        default=None,
        help='Path to the statistics file (default: ./game-stats.json)'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='action', metavar='command')
    subparsers.add_parser('start', help='Start the interactive Rock-Paper-Scissors game')
    subparsers.add_parser('stats', help='Display game statistics')
    subparsers.add_parser('reset', help='Reset game statistics')
    play_parser = subparsers.add_parser('play', help='Play a single game directly')
    play_parser.add_argument(
        'move',
        nargs='?',
        default='',
        help='Your move (rock, paper, or scissors)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    action = Action(args.action) if args.action else Action.START
    move = getattr(args, 'move', None)

    app = Application(
        config_path=args.config,
        stats_file=args.stats_file,
        log_level=args.log_level
    )

    try:
        return app.run(action, move)
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        return 0


if __name__ == "__main__":
    sys.exit(main())
