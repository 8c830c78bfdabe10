"""AI Career Mentor: a chat bot for interview preparation.

Walks a user through profile collection, mock interview questions with
feedback and follow-ups, resume review and a personalized prep plan.
"""

from .config import Config, load_config
from .dispatcher import Dispatcher
from .dialogue import ConversationState, ConversationStore, Mode
from .llm_client import LLMClient
from .llm_client_gemini import GeminiLLMClient
from .orchestration import MentorOrchestrator

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "Dispatcher",
    "ConversationState",
    "ConversationStore",
    "Mode",
    "LLMClient",
    "GeminiLLMClient",
    "MentorOrchestrator",
]
