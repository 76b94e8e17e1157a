"""牌组CLI渲染模块.

这个模块负责将牌组渲染为命令行文本，
实现显示逻辑与核心牌组逻辑的分离。
"""

from ...core.deck import Deck


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，只返回字符串，不直接输出。
    """

    @staticmethod
    def render_cards(deck: Deck) -> str:
        """渲染带序号的牌列表.

        Args:
            deck: 要渲染的牌组

        Returns:
            每张牌一行的字符串，格式为 "<序号> <标签>"
        """
        return "\n".join(Deck(deck).lines())

    @staticmethod
    def render_deck_inline(deck: Deck) -> str:
        """渲染单行的牌组表示，例如 "[Ace of Spades Two of Spades]"."""
        return str(Deck(deck))

    @staticmethod
    def render_deal(hand: Deck, remainder: Deck) -> str:
        """渲染一次发牌的结果：手牌与剩余牌组在同一行."""
        return f"{CLIRenderer.render_deck_inline(hand)} {CLIRenderer.render_deck_inline(remainder)}"

    @staticmethod
    def render_error(message: str) -> str:
        """渲染错误信息."""
        return f"错误: {message}"
