from .first_move_agent import FirstMoveAgent

__all__ = ["FirstMoveAgent"]
