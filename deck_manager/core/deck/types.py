"""
扑克牌组相关类型定义.

定义牌的花色、点数枚举以及牌面标签的格式.
"""

from enum import Enum
from typing import List

# 一张牌就是它的文本标签，例如 "Ace of Spades"
Card = str

CARD_DELIMITER = ","


class Suit(Enum):
    """
    花色枚举.

    声明顺序即建牌时的外层遍历顺序.
    """

    SPADES = "Spades"      # 黑桃
    DIAMONDS = "Diamonds"  # 方块
    HEARTS = "Hearts"      # 红桃
    CLUBS = "Clubs"        # 梅花


class Value(Enum):
    """
    点数枚举.

    只包含固定的四个点数，声明顺序即建牌时的内层遍历顺序.
    """

    ACE = "Ace"
    TWO = "Two"
    THREE = "Three"
    FOUR = "Four"


def card_label(value: Value, suit: Suit) -> Card:
    """
    生成牌面标签.

    Args:
        value: 点数
        suit: 花色

    Returns:
        Card: 形如 "<点数> of <花色>" 的标签

    Raises:
        TypeError: 当点数或花色类型无效时
    """
    if not isinstance(value, Value):
        raise TypeError(f"点数必须是Value类型，实际: {type(value)}")
    if not isinstance(suit, Suit):
        raise TypeError(f"花色必须是Suit类型，实际: {type(suit)}")
    return f"{value.value} of {suit.value}"


def get_all_suits() -> List[Suit]:
    """获取所有花色."""
    return list(Suit)


def get_all_values() -> List[Value]:
    """获取所有点数."""
    return list(Value)
