"""
ConfigService - 配置管理服务

集中管理牌组持久化配置和日志配置. 花色与点数是固定常量，不属于配置.
"""

import codecs
import logging
from typing import Dict
from dataclasses import dataclass
from enum import Enum

from .types import QueryResult
from ..core.exceptions import DeckConfigError

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@dataclass(frozen=True)
class DeckConfig:
    """牌组配置"""
    output_file: str = "cardfile"   # 入口程序保存原始牌组的文件名
    hand_size: int = 4              # 入口程序的发牌数量
    file_mode: int = 0o666          # 新建文件时请求的权限位
    encoding: str = "utf-8"

    def __post_init__(self):
        """验证配置的有效性"""
        if not self.output_file:
            raise DeckConfigError("输出文件名不能为空")
        if isinstance(self.hand_size, bool) or not isinstance(self.hand_size, int):
            raise DeckConfigError(f"发牌数量必须是整数: {self.hand_size!r}")
        if self.hand_size < 0:
            raise DeckConfigError(f"发牌数量不能为负数: {self.hand_size}")
        if not 0 <= self.file_mode <= 0o777:
            raise DeckConfigError(f"无效的文件权限: {oct(self.file_mode)}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise DeckConfigError(f"无效的文件编码: {self.encoding}") from e


@dataclass(frozen=True)
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%H:%M:%S'

    def __post_init__(self):
        """验证日志级别"""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise DeckConfigError(f"无效的日志级别: {self.log_level}")

    @property
    def level(self) -> int:
        """返回logging模块使用的数值级别"""
        return getattr(logging, self.log_level.upper())


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, object]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
        }
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
        }
        self.logger.debug("默认配置加载完成")

    def get_deck_config(self, profile: str = "default") -> QueryResult[DeckConfig]:
        """
        获取牌组配置

        Args:
            profile: 配置名，不存在时回退到default

        Returns:
            查询结果，包含牌组配置
        """
        config_profiles = self._configs[ConfigType.DECK]
        if profile not in config_profiles:
            self.logger.warning(f"未找到牌组配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(config_profiles[profile])

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名，不存在时回退到default

        Returns:
            查询结果，包含日志配置
        """
        config_profiles = self._configs[ConfigType.LOGGING]
        if profile not in config_profiles:
            self.logger.warning(f"未找到日志配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(config_profiles[profile])

