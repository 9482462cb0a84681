"""Agent modules."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = ["BaseAgent", "RandomAgent"]
