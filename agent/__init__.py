"""
Agent package for the IR translator backend.
Agents take plain inputs and return plain results; services orchestrate them.
"""
from .term_detection import TermMatcherAgent

__all__ = ["TermMatcherAgent"]
