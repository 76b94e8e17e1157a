"""
扑克牌组管理模块.

提供Deck类及其构建、发牌、序列化和文件持久化操作.
"""

from .types import Card, Suit, Value, CARD_DELIMITER, card_label, get_all_suits, get_all_values
from .deck import (
    Deck, new_deck, show_cards, deal, to_string, from_string, save_file, read_file
)

__all__ = [
    'Card', 'Suit', 'Value', 'CARD_DELIMITER', 'card_label',
    'get_all_suits', 'get_all_values',
    'Deck', 'new_deck', 'show_cards', 'deal', 'to_string', 'from_string',
    'save_file', 'read_file',
]
