from .config import ChatConfig, RepoConfig, DEFAULT_MODEL
from .review import ReviewCategory, ReviewComment
from .webhook import GitHubPREvent, GitHubCommentEvent

__all__ = [
    "ChatConfig",
    "RepoConfig",
    "DEFAULT_MODEL",
    "ReviewCategory",
    "ReviewComment",
    "GitHubPREvent",
    "GitHubCommentEvent",
]
