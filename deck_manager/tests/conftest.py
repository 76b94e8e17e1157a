"""
Deck Manager Test Configuration - pytest配置文件

提供通用的测试fixture并注册测试标记。
"""

import logging
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from deck_manager.core.deck import Deck, new_deck


@pytest.fixture
def fresh_deck() -> Deck:
    """新建的16张牌组"""
    return new_deck()


@pytest.fixture
def card_file(tmp_path) -> Path:
    """临时目录下尚未创建的牌组文件路径"""
    return tmp_path / "cardfile"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """测试结束后恢复根日志记录器的处理器和级别"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
