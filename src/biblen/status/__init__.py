"""Repository status module

- StatusProvider: 状态提供者接口
- GitStatusProvider: 基于 git 的实现
- GitClient: git 子进程客户端
"""

from .git import GitClient
from .provider import GitStatusProvider, StatusProvider, format_status

__all__ = [
    "StatusProvider",
    "GitStatusProvider",
    "GitClient",
    "format_status",
]
