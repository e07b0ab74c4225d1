"""
Clients for the OpenAI API.

Protocol defines WHAT, implementations define HOW: OpenAI talks to the
REST API over httpx, MockOpenAI answers from canned fixtures.
"""

from .base import OpenAIProtocol
from .mock import InvalidPromptError, MockOpenAI, MockOpenAIError
from .rest import OpenAI

__all__ = ["InvalidPromptError", "MockOpenAI", "MockOpenAIError", "OpenAI", "OpenAIProtocol"]
