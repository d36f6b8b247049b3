"""Telemetry - 统一日志和指标入口

提供统一的日志工厂和指标 facade，便于观测性追踪。

alternate screen 独占终端，日志不能写到 stdout/stderr：
包 logger 默认挂 NullHandler，由宿主程序决定输出位置。

指标示例: render.normal, render.too_small, resize.polled, git.errors
"""

import logging

from . import config

_ROOT_LOGGER = "biblen"


def get_logger(name: str) -> logging.Logger:
    """获取带模块前缀的 logger

    Args:
        name: 模块名（通常使用 __name__）

    Returns:
        Logger 实例
    """
    return logging.getLogger(name)


def setup_logging(level: str | None = None) -> logging.Logger:
    """配置包 logger（幂等）

    Args:
        level: 日志级别，None 使用 config.LOG_LEVEL

    Returns:
        包根 logger
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel((level or config.LOG_LEVEL).upper())
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


class Metrics:
    """指标收集 facade

    提供简单的计数器接口，内存存储。
    """

    def __init__(self):
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """递增计数器

        Args:
            name: 指标名（如 "git.errors"）
            labels: 可选标签（如 {"command": "fetch"}）
            value: 递增值，默认 1
        """
        if not config.METRICS_ENABLED:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """获取计数器值（用于测试）"""
        key = self._make_key(name, labels)
        return self._counters.get(key, 0)

    def reset(self) -> None:
        """重置所有指标（用于测试）"""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        """生成指标 key"""
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"

    def get_all_counters(self) -> dict[str, int]:
        """获取所有计数器（用于调试）"""
        return dict(self._counters)


# 全局指标实例
metrics = Metrics()
