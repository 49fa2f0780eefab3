from .llm import build_completion_request, call_cerebras, extract_message_content
from .evaluator import ClaimEvaluator

__all__ = [
    "build_completion_request",
    "call_cerebras",
    "extract_message_content",
    "ClaimEvaluator",
]
