"biblen 入口 - 终端 splash 屏"

import sys

from .app import SplashApp
from .status.provider import GitStatusProvider
from .telemetry import get_logger, setup_logging
from .terminal.blessed_surface import BlessedSurface

logger = get_logger(__name__)


def run() -> None:
    """获取终端会话并运行 SplashApp，终端错误直接抛出"""
    surface = BlessedSurface()
    provider = GitStatusProvider()

    with surface.session():
        SplashApp(surface, provider).run()


def main() -> int:
    """入口函数

    Returns:
        进程退出码：正常退出 0，中断 130
    """
    setup_logging()
    try:
        run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
