"""
牌组业务异常定义.

核心层只抛出异常，由应用层转换为结果对象.
"""

from typing import Optional


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class DealSizeError(DeckError, ValueError):
    """发牌数量超出牌组范围异常"""

    def __init__(self, size: int, deck_size: int):
        super().__init__(f"发牌数量超出范围: {size}，牌组中只有{deck_size}张牌")
        self.size = size
        self.deck_size = deck_size


class DeckFileError(DeckError):
    """牌组文件读写异常"""

    def __init__(self, filename: str, operation: str, reason: Optional[str] = None):
        action = "读取" if operation == "read" else "写入"
        message = f"牌组文件{action}失败: {filename}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.filename = filename
        self.operation = operation


class DeckConfigError(DeckError):
    """牌组配置错误异常"""
    pass
