"""Status Provider - 仓库同步状态

StatusProvider 是 event loop 消费的接口，check_status() 同步返回一行文本。
GitStatusProvider 通过 git 子进程计算 ahead/behind：
- fetch 失败忽略
- 任一计数失败视为 0
- 永远返回三种固定格式之一，不会把错误暴露给用户
"""

from abc import ABC, abstractmethod

from .. import config
from ..telemetry import get_logger, metrics
from .git import GitClient

logger = get_logger(__name__)


def format_status(ahead: int, behind: int) -> str:
    """把 ahead/behind 计数格式化为状态行（ahead 优先）"""
    if ahead > 0:
        return f"[info] You are ahead by {ahead} commit(s)"
    if behind > 0:
        return f"[info] You are behind by {behind} commit(s)"
    return "[info] You are up to date with upstream"


class StatusProvider(ABC):
    """状态提供者接口"""

    @abstractmethod
    def check_status(self) -> str:
        """返回描述仓库同步状态的一行文本（可能阻塞）"""
        ...


class GitStatusProvider(StatusProvider):
    """基于 git 的状态提供者"""

    def __init__(self, client: GitClient | None = None, upstream: str | None = None):
        """
        Args:
            client: git 客户端，None 时使用默认 GitClient
            upstream: 对比的远端引用，None 使用 config.UPSTREAM_REF
        """
        self._client = client or GitClient()
        self._upstream = upstream or config.UPSTREAM_REF

    def check_status(self) -> str:
        metrics.inc("status.check")

        if not self._client.fetch():
            logger.debug("[Status] fetch failed, comparing against local refs")

        ahead = self._client.count_commits(f"{self._upstream}..HEAD") or 0
        behind = self._client.count_commits(f"HEAD..{self._upstream}") or 0
        logger.info(f"[Status] ahead={ahead} behind={behind} upstream={self._upstream}")

        return format_status(ahead, behind)
