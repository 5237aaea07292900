from .review.chat import Reviewer
from .models.config import ChatConfig

__all__ = ["Reviewer", "ChatConfig"]
