"""Deck Manager 用户界面层."""
