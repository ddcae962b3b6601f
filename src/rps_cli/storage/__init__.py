"""
统计存储模块
Statistics Storage Module
"""
from .statistics_store import StatisticsStore

__all__ = ['StatisticsStore']
