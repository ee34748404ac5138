"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- GreedyPolicy: Sell first, then spend capital
- RandomPolicy: Uniformly random legal moves
"""

from .policy import BotPolicy, BotDecision, GreedyPolicy, RandomPolicy

__all__ = [
    "BotPolicy",
    "BotDecision",
    "GreedyPolicy",
    "RandomPolicy",
]
