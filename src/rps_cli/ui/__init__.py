"""
用户界面模块
User Interface Module
"""
from .prompter import Prompter, Choice
from .console import Console

__all__ = ['Prompter', 'Choice', 'Console']
