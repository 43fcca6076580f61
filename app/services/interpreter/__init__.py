"""LLM interpreter framework.

Subclass BaseInterpreter with a system prompt, an input formatter and an
output parser to get a typed call into Claude.
"""

from .base import BaseInterpreter

__all__ = [
    "BaseInterpreter",
]
