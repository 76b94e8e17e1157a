"""Deck Manager 测试包."""
