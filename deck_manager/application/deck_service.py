"""
DeckService - 牌组应用服务

将核心层的牌组操作包装为结果对象:
- 建牌与发牌
- 保存牌组到文件
- 从文件读取牌组

核心层抛出的业务异常在这里转换为失败结果并记录日志，不向上抛出.
"""

import logging
from typing import Optional, Tuple

from .types import CommandResult, QueryResult, ResultStatus
from .config_service import ConfigService, DeckConfig
from ..core.deck import Deck, new_deck, deal, save_file, read_file
from ..core.exceptions import DealSizeError, DeckFileError


class DeckService:
    """牌组应用服务"""

    def __init__(self, config: Optional[DeckConfig] = None,
                 config_service: Optional[ConfigService] = None):
        """
        初始化牌组服务

        Args:
            config: 牌组配置，优先于config_service
            config_service: 配置服务，未提供config时从中读取default配置
        """
        self.logger = logging.getLogger(__name__)
        if config is None:
            config_service = config_service or ConfigService()
            config = config_service.get_deck_config().data
        self.config = config

    def new_deck(self) -> QueryResult[Deck]:
        """创建一副新牌"""
        deck = new_deck()
        self.logger.debug(f"创建新牌组，共{len(deck)}张")
        return QueryResult.success_result(deck, message=f"创建新牌组，共{len(deck)}张")

    def deal(self, deck: Deck, size: Optional[int] = None) -> QueryResult[Tuple[Deck, Deck]]:
        """
        发牌

        Args:
            deck: 原牌组
            size: 发牌数量，默认为配置中的hand_size

        Returns:
            查询结果，成功时data为(手牌, 剩余牌组)
        """
        if size is None:
            size = self.config.hand_size
        try:
            hand, remainder = deal(deck, size)
        except (DealSizeError, TypeError) as e:
            self.logger.warning(f"发牌失败: {e}")
            return QueryResult.validation_error(
                str(e), error_code="DEAL_SIZE_OUT_OF_RANGE", error=e
            )

        self.logger.debug(f"发出{len(hand)}张牌，剩余{len(remainder)}张")
        return QueryResult.success_result((hand, remainder))

    def save_deck(self, deck: Deck, filename: Optional[str] = None) -> CommandResult:
        """
        保存牌组到文件

        Args:
            deck: 要保存的牌组
            filename: 文件路径，默认为配置中的output_file

        Returns:
            命令结果，失败时error为DeckFileError
        """
        if filename is None:
            filename = self.config.output_file
        try:
            save_file(deck, filename, mode=self.config.file_mode,
                      encoding=self.config.encoding)
        except DeckFileError as e:
            self.logger.error(f"保存牌组失败: {e}")
            return CommandResult.failure_result(
                str(e),
                error_code="DECK_FILE_WRITE_FAILED",
                status=ResultStatus.SYSTEM_ERROR,
                error=e
            )

        self.logger.info(f"牌组已保存到 {filename}，共{len(deck)}张")
        return CommandResult.success_result(
            f"牌组已保存到 {filename}",
            data={'filename': filename, 'card_count': len(deck)}
        )

    def load_deck(self, filepath: Optional[str] = None) -> QueryResult[Deck]:
        """
        从文件读取牌组

        Args:
            filepath: 文件路径，默认为配置中的output_file

        Returns:
            查询结果. 失败时data为空牌组，调用方应先检查success再使用data
        """
        if filepath is None:
            filepath = self.config.output_file
        try:
            deck = read_file(filepath, encoding=self.config.encoding)
        except DeckFileError as e:
            self.logger.error(f"读取牌组失败: {e}")
            return QueryResult.failure_result(
                str(e),
                error_code="DECK_FILE_READ_FAILED",
                status=ResultStatus.SYSTEM_ERROR,
                data=Deck(),
                error=e
            )

        self.logger.info(f"从 {filepath} 读取牌组，共{len(deck)}张")
        return QueryResult.success_result(deck, message=f"读取牌组，共{len(deck)}张")
