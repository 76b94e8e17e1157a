#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Deck Manager 命令行入口

建一副新牌并显示，发4张牌后显示手牌和剩余牌组，
最后把未发牌的原始牌组保存到工作目录下的 cardfile。
保存失败时记录错误并以退出码1结束。
"""

import logging
import sys
from typing import Optional

from deck_manager.application import ConfigService, DeckService, LoggingConfig
from deck_manager.ui.cli.render import CLIRenderer

logger = logging.getLogger(__name__)

_LOG_HANDLER_NAME = "deck_manager_console"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Handler:
    """配置控制台日志处理器.

    日志写入stderr，标准输出只留给牌组内容。重复调用时替换之前安装的处理器。

    Args:
        config: 日志配置，默认为LoggingConfig()

    Returns:
        安装到根日志记录器上的处理器
    """
    config = config or LoggingConfig()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.log_format, datefmt=config.date_format))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        if existing.get_name() == _LOG_HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(config.level)

    return handler


def run(service: DeckService) -> int:
    """执行一次建牌、显示、发牌、保存流程.

    Returns:
        进程退出码
    """
    deck = service.new_deck().data
    rendered = CLIRenderer.render_cards(deck)
    if rendered:
        print(rendered)

    deal_result = service.deal(deck)
    if not deal_result.success:
        print(CLIRenderer.render_error(deal_result.message), file=sys.stderr)
        return 1
    hand, remainder = deal_result.data
    print(CLIRenderer.render_deal(hand, remainder))

    save_result = service.save_deck(deck)
    if not save_result.success:
        print(CLIRenderer.render_error(save_result.message), file=sys.stderr)
        return 1

    logger.info(save_result.message)
    return 0


def main() -> int:
    """主函数"""
    config_service = ConfigService()
    setup_logging(config_service.get_logging_config().data)
    return run(DeckService(config_service=config_service))


if __name__ == "__main__":
    sys.exit(main())
