from .prompts import build_review_prompt, classify_title, guidance_for
from .chat import Reviewer
from .engine import ReviewEngine, EngineReviewResult

__all__ = [
    "build_review_prompt",
    "classify_title",
    "guidance_for",
    "Reviewer",
    "ReviewEngine",
    "EngineReviewResult",
]
