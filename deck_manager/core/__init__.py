"""
Deck Manager 核心层.

包含牌组数据结构、纯函数操作与业务异常定义，不依赖应用层和UI层.
"""
