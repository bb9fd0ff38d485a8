"""
UI package initialization
"""

from .preferences import PreferencesManager

__all__ = ['PreferencesManager']
