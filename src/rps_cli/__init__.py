"""
剪刀石头布命令行游戏
Rock Paper Scissors CLI Game
"""
__version__ = "1.0.0"
