# -*- coding: utf-8 -*-
"""
Game session for the 2048 rules engine.

This module provides the `GameSession` class, which owns the board, the scores, the win and game over flags and
the recent-run history, and applies one complete transition per player input.
"""

from .history import RecentRun, ResetReason, RunHistory
from .session import GameSession, SessionSnapshot, SessionStatus

__all__ = ["GameSession", "RecentRun", "ResetReason", "RunHistory", "SessionSnapshot", "SessionStatus"]
