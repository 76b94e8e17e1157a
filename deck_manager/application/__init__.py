"""
Application Layer - 应用服务层

以结果对象的形式向UI层暴露核心牌组操作，并集中管理配置.
"""

from .types import ResultStatus, CommandResult, QueryResult
from .config_service import ConfigService, DeckConfig, LoggingConfig
from .deck_service import DeckService

__all__ = [
    'ResultStatus', 'CommandResult', 'QueryResult',
    'ConfigService', 'DeckConfig', 'LoggingConfig',
    'DeckService',
]
