"""正则表达式缓存模块。

按模式文本缓存编译后的正则表达式，避免重复编译开销。

缓存分两层：
- 强引用层：最近使用的 ``max_strong_entries`` 个模式（LRU 顺序）
- 弱引用层：所有已缓存的模式，仅在其他地方仍持有引用时保留

被挤出强引用层且不再被外部引用的模式会被回收，下次使用时重新编译。
"""
from __future__ import annotations

import logging
import re
import threading
import weakref
from collections import OrderedDict

from regex_utils.constants import DEFAULT_MAX_STRONG_ENTRIES

logger = logging.getLogger(__name__)


class PatternCache:
    """线程安全的模式文本 -> 编译结果缓存。

    - get() 会刷新 LRU 顺序
    - 编译在锁外进行；并发编译同一模式时以先写入者为准，所有调用方拿到同一对象
    """

    def __init__(self, *, max_strong_entries: int = DEFAULT_MAX_STRONG_ENTRIES):
        if max_strong_entries <= 0:
            raise ValueError("max_strong_entries must be > 0")

        self._max_strong_entries = int(max_strong_entries)
        self._strong: OrderedDict[str, re.Pattern[str]] = OrderedDict()
        self._weak: weakref.WeakValueDictionary[str, re.Pattern[str]] = weakref.WeakValueDictionary()
        self._lock = threading.Lock()

        self.hits = 0
        self.misses = 0
        self.compilations = 0
        self.evictions = 0

    @property
    def max_strong_entries(self) -> int:
        return self._max_strong_entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._weak)

    def __contains__(self, pattern: object) -> bool:
        with self._lock:
            return pattern in self._weak

    def set_limits(self, *, max_strong_entries: int) -> None:
        if max_strong_entries <= 0:
            raise ValueError("max_strong_entries must be > 0")
        with self._lock:
            self._max_strong_entries = int(max_strong_entries)
            evicted = self._evict_if_needed()
        self._log_evicted(evicted)

    @staticmethod
    def _log_evicted(evicted: list[str]) -> None:
        # 在锁外记录，日志处理器可以安全地回调本缓存
        for key in evicted:
            logger.debug("正则缓存强引用层淘汰: %r", key)

    def _evict_if_needed(self) -> list[str]:
        # 调用方需持有 self._lock
        evicted = []
        while len(self._strong) > self._max_strong_entries:
            key, _ = self._strong.popitem(last=False)
            self.evictions += 1
            evicted.append(key)
        return evicted

    def _touch(self, pattern: str, compiled: re.Pattern[str]) -> list[str]:
        self._strong[pattern] = compiled
        self._strong.move_to_end(pattern, last=True)
        return self._evict_if_needed()

    def _lookup(self, pattern: str) -> tuple[re.Pattern[str] | None, list[str]]:
        # 调用方需持有 self._lock
        compiled = self._strong.get(pattern)
        if compiled is None:
            compiled = self._weak.get(pattern)
        if compiled is None:
            return None, []
        return compiled, self._touch(pattern, compiled)

    def get(self, pattern: str) -> re.Pattern[str]:
        """获取或创建编译后的正则表达式。

        Args:
            pattern: 正则表达式模式字符串（区分大小写，按原文精确匹配）。

        Returns:
            编译后的正则表达式对象。

        Raises:
            re.error: 模式语法无效。
        """
        with self._lock:
            compiled, evicted = self._lookup(pattern)
            if compiled is not None:
                self.hits += 1
            else:
                self.misses += 1
        if compiled is not None:
            self._log_evicted(evicted)
            return compiled

        logger.debug("正则缓存未命中，编译: %r", pattern)
        fresh = re.compile(pattern)

        with self._lock:
            self.compilations += 1
            compiled, evicted = self._lookup(pattern)
            if compiled is None:
                compiled = fresh
                self._weak[pattern] = compiled
                evicted = self._touch(pattern, compiled)
        self._log_evicted(evicted)
        return compiled


_default_cache = PatternCache()


def get_default_cache() -> PatternCache:
    """返回进程级共享的模式缓存。"""
    return _default_cache


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """通过共享缓存获取编译后的正则表达式。"""
    return _default_cache.get(pattern)
