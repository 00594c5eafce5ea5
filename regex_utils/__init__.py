# 正则工具包：模式缓存、替换、整串匹配与捕获组提取
from .constants import UUID_PATTERN
from .matching import get_match, matches, replace
from .regex_cache import PatternCache, compile_pattern, get_default_cache
from .settings import CacheSettings

__all__ = [
    "UUID_PATTERN",
    "CacheSettings",
    "PatternCache",
    "compile_pattern",
    "get_default_cache",
    "get_match",
    "matches",
    "replace",
]
