"""Gymnasium bindings for the memo engine."""
from .env import MemoEnv
from .state_space import StateSpace

__all__ = ["MemoEnv", "StateSpace"]
