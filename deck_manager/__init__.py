"""
Deck Manager - 扑克牌组管理.

构建固定的16张牌组，支持显示、发牌以及逗号分隔文本文件的保存与读取.
"""

__version__ = "0.1.0"
