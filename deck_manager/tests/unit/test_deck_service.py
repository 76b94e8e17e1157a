"""
DeckService 单元测试.

验证核心层异常被转换为结果对象，并且失败会被记录到日志.
"""

import logging

import pytest

from deck_manager.application import DeckService, DeckConfig, ConfigService, ResultStatus
from deck_manager.application.types import QueryResult
from deck_manager.core.deck import Deck, new_deck
from deck_manager.core.exceptions import DealSizeError, DeckFileError


@pytest.fixture
def service(card_file) -> DeckService:
    return DeckService(config=DeckConfig(output_file=str(card_file)))


class TestDeckServiceConfig:
    """配置注入测试."""

    def test_default_config(self):
        assert DeckService().config == DeckConfig()

    def test_config_from_service(self):
        config_service = ConfigService()
        custom = DeckConfig(output_file="custom_file", hand_size=2)
        config_service.get_deck_config = lambda profile="default": QueryResult.success_result(custom)
        assert DeckService(config_service=config_service).config is custom


class TestNewDeckAndDeal:
    """建牌与发牌测试."""

    def test_new_deck(self, service):
        result = service.new_deck()
        assert result.success
        assert result.data == new_deck()

    def test_deal_uses_configured_hand_size(self, service):
        result = service.deal(new_deck())
        assert result.success
        hand, remainder = result.data
        assert len(hand) == 4
        assert len(remainder) == 12

    def test_deal_explicit_size(self, service):
        hand, remainder = service.deal(new_deck(), 10).data
        assert len(hand) == 10
        assert len(remainder) == 6

    def test_deal_out_of_range_is_validation_error(self, service, caplog):
        with caplog.at_level(logging.WARNING):
            result = service.deal(new_deck(), 17)
        assert not result.success
        assert result.status is ResultStatus.VALIDATION_ERROR
        assert result.error_code == "DEAL_SIZE_OUT_OF_RANGE"
        assert isinstance(result.error, DealSizeError)
        assert "发牌失败" in caplog.text

    def test_deal_non_integer_is_validation_error(self, service):
        result = service.deal(new_deck(), "4")
        assert result.status is ResultStatus.VALIDATION_ERROR
        assert isinstance(result.error, TypeError)


class TestSaveAndLoad:
    """文件持久化测试."""

    def test_save_then_load(self, service, card_file):
        deck = new_deck()
        save_result = service.save_deck(deck)
        assert save_result.success
        assert save_result.data == {'filename': str(card_file), 'card_count': 16}

        load_result = service.load_deck()
        assert load_result.success
        assert load_result.data == deck

    def test_save_explicit_filename(self, service, tmp_path):
        target = tmp_path / "other"
        assert service.save_deck(Deck(["Ace of Spades"]), str(target)).success
        assert target.read_text(encoding="utf-8") == "Ace of Spades"

    def test_save_failure(self, service, tmp_path, caplog):
        target = str(tmp_path / "missing" / "cardfile")
        with caplog.at_level(logging.ERROR):
            result = service.save_deck(new_deck(), target)
        assert not result.success
        assert result.status is ResultStatus.SYSTEM_ERROR
        assert result.error_code == "DECK_FILE_WRITE_FAILED"
        assert isinstance(result.error, DeckFileError)
        assert "保存牌组失败" in caplog.text

    def test_load_failure_returns_empty_deck(self, service, caplog):
        with caplog.at_level(logging.ERROR):
            result = service.load_deck()
        assert not result.success
        assert result.error_code == "DECK_FILE_READ_FAILED"
        assert isinstance(result.error, DeckFileError)
        assert isinstance(result.data, Deck)
        assert result.data.is_empty
        assert "读取牌组失败" in caplog.text

    def test_load_empty_file(self, service, card_file):
        card_file.write_text("", encoding="utf-8")
        result = service.load_deck()
        assert result.success
        assert result.data.is_empty

    def test_save_unencodable_label_is_failure_result(self, service, card_file):
        card_file.write_text("Ace of Spades", encoding="utf-8")
        result = service.save_deck(Deck(["\ud800"]))
        assert not result.success
        assert result.error_code == "DECK_FILE_WRITE_FAILED"
        assert isinstance(result.error, DeckFileError)
        assert card_file.read_text(encoding="utf-8") == "Ace of Spades"

    def test_save_empty_filename_is_not_replaced_by_default(self, service, card_file):
        result = service.save_deck(new_deck(), "")
        assert not result.success
        assert result.error_code == "DECK_FILE_WRITE_FAILED"
        assert not card_file.exists()

    def test_load_empty_filepath_is_not_replaced_by_default(self, service, card_file):
        service.save_deck(new_deck())
        result = service.load_deck("")
        assert not result.success
        assert result.data.is_empty
