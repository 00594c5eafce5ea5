from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from regex_utils.constants import DEFAULT_MAX_STRONG_ENTRIES
from regex_utils.regex_cache import PatternCache, get_default_cache

logger = logging.getLogger(__name__)


@dataclass
class CacheSettings:
    max_strong_entries: int = DEFAULT_MAX_STRONG_ENTRIES

    def _validate(self) -> None:
        try:
            self.max_strong_entries = int(self.max_strong_entries)
        except (TypeError, ValueError):
            self.max_strong_entries = DEFAULT_MAX_STRONG_ENTRIES
        if self.max_strong_entries <= 0:
            self.max_strong_entries = DEFAULT_MAX_STRONG_ENTRIES

    @classmethod
    def load(cls, config_file: str) -> "CacheSettings":
        """读取 JSON 配置文件；文件缺失或无法解析时使用默认值。"""
        cfg = cls()
        if os.path.exists(config_file):
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                cfg.max_strong_entries = data.get("max_strong_entries", cfg.max_strong_entries)
            except (OSError, ValueError, AttributeError) as e:
                logger.warning("缓存配置文件解析失败: %s", e)
                cfg = cls()
        cfg._validate()
        return cfg

    def apply(self, cache: Optional[PatternCache] = None) -> None:
        """把配置写入缓存（默认写入进程级共享缓存）。"""
        self._validate()
        target = cache if cache is not None else get_default_cache()
        target.set_limits(max_strong_entries=self.max_strong_entries)
