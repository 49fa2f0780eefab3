from .state import ClaimSubmission, InvalidTransition, SubmissionState
from .client import EvaluatorClient
from .leaderboard import make_leaderboard
from .render import render_page

__all__ = [
    "ClaimSubmission",
    "InvalidTransition",
    "SubmissionState",
    "EvaluatorClient",
    "make_leaderboard",
    "render_page",
]
