"""正则替换、整串匹配与捕获组提取。

每个函数既接受预编译的 ``re.Pattern``，也接受模式文本；
模式文本先经共享缓存编译（语法错误以 ``re.error`` 原样抛出）。
"""
from __future__ import annotations

import re
from typing import Callable, Optional, Union

from regex_utils.regex_cache import compile_pattern

PatternLike = Union[str, re.Pattern]


def _resolve(pattern: PatternLike) -> re.Pattern[str]:
    if isinstance(pattern, str):
        return compile_pattern(pattern)
    if isinstance(pattern, re.Pattern):
        return pattern
    raise TypeError(f"pattern must be str or re.Pattern, got {type(pattern).__name__}")


def replace(
    s: str,
    pattern: PatternLike,
    replacer: Callable[..., str],
) -> str:
    """替换输入中所有与模式匹配的子串（从左到右，不重叠）。

    两种形式的 replacer 参数不同：

    - ``pattern`` 为预编译模式时，replacer 接收匹配到的子串 ``str``；
    - ``pattern`` 为模式文本时，replacer 接收完整的 ``re.Match``，
      可读取捕获组与起止位置。

    replacer 的返回值按字面插入，不展开 ``\\1`` 等反向引用。
    replacer 抛出的异常直接传播给调用方。

    Args:
        s: 原始字符串。
        pattern: 预编译模式或模式文本。
        replacer: 计算替换文本的函数。

    Returns:
        替换后的新字符串。

    Raises:
        re.error: 模式文本语法无效。
    """
    if isinstance(pattern, str):
        return compile_pattern(pattern).sub(replacer, s)
    compiled = _resolve(pattern)
    return compiled.sub(lambda m: replacer(m.group()), s)


def matches(s: str, pattern: PatternLike) -> bool:
    """整个字符串是否与模式完全匹配（首尾锚定，不做部分匹配）。"""
    return _resolve(pattern).fullmatch(s) is not None


def get_match(s: str, pattern: PatternLike, group: Union[int, str] = 0) -> Optional[str]:
    """返回模式第一次匹配中指定捕获组的文本。

    无匹配、捕获组不存在或该组未参与本次匹配时返回 ``None``，不抛异常。

    Args:
        s: 要搜索的字符串。
        pattern: 预编译模式或模式文本。
        group: 捕获组序号（0 为整个匹配）或组名。

    Returns:
        捕获组文本，或 ``None``。
    """
    compiled = _resolve(pattern)
    m = compiled.search(s)
    if m is None:
        return None
    if isinstance(group, str):
        if group not in compiled.groupindex:
            return None
    elif isinstance(group, bool) or not isinstance(group, int) or not 0 <= group <= compiled.groups:
        return None
    return m.group(group)
