"""Configuration package for the megafauna rules core.

Game constants are grouped by concern: DNA alphabets and dentitions in
``genetics``, board geometry in ``board``, contest tuning in ``contests``.
``BoardConfig`` wraps the board geometry for callers that want a
non-standard board.
"""

from megafauna.config.board_config import BoardConfig

__all__ = ["BoardConfig"]
