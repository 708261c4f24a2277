from .core import Agent, AgentBuilder, BaseAgent
from .greedy import GreedyAgent, GreedyAgentConfig
from .random import RandomAgent

__all__ = ["Agent", "AgentBuilder", "BaseAgent", "GreedyAgent", "GreedyAgentConfig", "RandomAgent"]
