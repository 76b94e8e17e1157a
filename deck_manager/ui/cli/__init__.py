"""
Deck Manager CLI 模块.

提供牌组的文本渲染和命令行入口.
"""

from .render import CLIRenderer

__all__ = ['CLIRenderer']
