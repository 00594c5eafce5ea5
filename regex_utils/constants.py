import re

# 缓存强引用层默认容量（最近使用的模式保持强引用）
DEFAULT_MAX_STRONG_ENTRIES = 128

# 预编译正则表达式模式
# 标准小写 UUID 文本（8-4-4-4-12 十六进制分组）
UUID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
