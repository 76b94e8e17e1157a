"""
扑克牌组管理.

定义Deck类，提供建牌、显示、发牌、序列化以及文件读写操作.
模块级函数是对Deck方法的薄封装，供不持有Deck实例的调用方使用.
"""

import os
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from .types import Card, CARD_DELIMITER, card_label, get_all_suits, get_all_values
from ..exceptions import DealSizeError, DeckFileError

DEFAULT_FILE_MODE = 0o666
DEFAULT_ENCODING = "utf-8"


class Deck:
    """
    表示一副按顺序排列的牌.

    牌的顺序决定显示顺序、发牌顺序和序列化顺序. 不强制唯一性，
    从文件读取的牌组可能包含任意标签.

    Attributes:
        _cards: 当前牌组中的牌列表

    Examples:
        >>> deck = new_deck()
        >>> len(deck)
        16
        >>> hand, rest = deal(deck, 4)
        >>> hand[0]
        'Ace of Spades'
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        """
        初始化牌组.

        Args:
            cards: 初始的牌，按顺序复制. 为None时创建空牌组
        """
        self._cards: List[Card] = list(cards) if cards is not None else []

    @property
    def cards(self) -> List[Card]:
        """返回牌列表的副本"""
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    def lines(self) -> List[str]:
        """
        生成显示用的文本行.

        Returns:
            List[str]: 每张牌一行，格式为 "<序号> <标签>"，序号从0开始
        """
        return [f"{index} {card}" for index, card in enumerate(self._cards)]

    def show_cards(self, stream: Optional[TextIO] = None) -> None:
        """
        按顺序输出每张牌及其序号.

        Args:
            stream: 输出流，默认为标准输出
        """
        for line in self.lines():
            print(line, file=stream)

    def to_string(self) -> str:
        """将牌组序列化为逗号分隔的字符串"""
        return CARD_DELIMITER.join(self._cards)

    def save_file(self, filename: Union[str, os.PathLike],
                  mode: int = DEFAULT_FILE_MODE,
                  encoding: str = DEFAULT_ENCODING) -> None:
        """
        将序列化后的牌组写入文件.

        文件不存在时创建，存在时截断. 权限位受进程umask影响.

        Args:
            filename: 文件路径
            mode: 新建文件时请求的权限位
            encoding: 文件编码

        Raises:
            DeckFileError: 编码失败或文件写入失败时抛出
        """
        # 先编码再打开文件，编码失败时原文件保持不变
        try:
            data = self.to_string().encode(encoding)
        except (UnicodeError, LookupError) as e:
            raise DeckFileError(os.fspath(filename), "write", str(e)) from e

        try:
            fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
            with open(fd, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise DeckFileError(os.fspath(filename), "write", e.strerror or str(e)) from e

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Deck(self._cards[index])
        return self._cards[index]

    def __add__(self, other: Iterable[Card]) -> 'Deck':
        return Deck(self._cards + list(other))

    def __eq__(self, other: object) -> bool:
        """
        判断两副牌是否相等.

        与另一个Deck或者标签的list/tuple逐张按顺序比较.
        """
        if isinstance(other, Deck):
            return self._cards == other._cards
        if isinstance(other, (list, tuple)):
            return self._cards == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"

    def __str__(self) -> str:
        """返回 "[a b c]" 形式的单行表示"""
        return "[" + " ".join(self._cards) + "]"


def new_deck() -> Deck:
    """
    创建一副新牌.

    花色为外层遍历、点数为内层遍历，共16张，顺序固定:
    先是黑桃的四个点数，然后是方块、红桃、梅花.

    Returns:
        Deck: 新牌组，首张为 "Ace of Spades"，末张为 "Four of Clubs"
    """
    return Deck(
        card_label(value, suit)
        for suit in get_all_suits()
        for value in get_all_values()
    )


def show_cards(deck: Deck, stream: Optional[TextIO] = None) -> None:
    """按顺序输出每张牌及其序号."""
    Deck(deck).show_cards(stream)


def deal(deck: Iterable[Card], size: int) -> Tuple[Deck, Deck]:
    """
    从牌组顶部发牌.

    原牌组不会被修改，返回的两副牌互相独立.

    Args:
        deck: 原牌组
        size: 发牌数量，0 <= size <= len(deck)

    Returns:
        Tuple[Deck, Deck]: (手牌, 剩余牌组)，二者按顺序拼接等于原牌组

    Raises:
        TypeError: 当size不是整数时
        DealSizeError: 当size为负数或大于牌组长度时
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"发牌数量必须是整数，实际: {type(size)}")

    cards = list(deck)
    if size < 0 or size > len(cards):
        raise DealSizeError(size, len(cards))

    return Deck(cards[:size]), Deck(cards[size:])


def to_string(deck: Iterable[Card]) -> str:
    """将牌组序列化为逗号分隔的字符串，空牌组得到空字符串"""
    return Deck(deck).to_string()


def from_string(text: str) -> Deck:
    """
    将逗号分隔的字符串还原为牌组.

    不校验牌面标签. 空字符串还原为空牌组，而不是包含一个空标签的牌组.

    Args:
        text: 序列化字符串

    Returns:
        Deck: 还原后的牌组
    """
    if not text:
        return Deck()
    return Deck(text.split(CARD_DELIMITER))


def save_file(deck: Iterable[Card], filename: Union[str, os.PathLike],
              mode: int = DEFAULT_FILE_MODE,
              encoding: str = DEFAULT_ENCODING) -> None:
    """
    将牌组保存到文件.

    Raises:
        DeckFileError: 文件写入失败时抛出
    """
    Deck(deck).save_file(filename, mode=mode, encoding=encoding)


def read_file(filepath: Union[str, os.PathLike],
              encoding: str = DEFAULT_ENCODING) -> Deck:
    """
    从文件读取牌组.

    读取全部内容并按逗号拆分，不做换行转换.

    Args:
        filepath: 文件路径
        encoding: 文件编码

    Returns:
        Deck: 读取到的牌组，空文件得到空牌组

    Raises:
        DeckFileError: 文件不存在、不可读或无法解码时抛出
    """
    try:
        with open(filepath, 'r', encoding=encoding, newline='') as f:
            content = f.read()
    except OSError as e:
        raise DeckFileError(os.fspath(filepath), "read", e.strerror or str(e)) from e
    except (UnicodeError, LookupError) as e:
        raise DeckFileError(os.fspath(filepath), "read", str(e)) from e

    return from_string(content)
