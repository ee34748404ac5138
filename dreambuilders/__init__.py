"""
Dream Builders - Deck-building business simulation engine

A deterministic, single-player rules engine where founders spend capital
to play cards, build a board of Tools, Products and Employees, and sell
Products until revenue reaches the goal. The package provides:
- State management and per-player effect context
- A card and hero power effect registry
- The sale pipeline and turn lifecycle
- A pending-choice queue for interactive effects
- Session, bot, HTTP and CLI collaborators
"""

__version__ = "0.1.0"
