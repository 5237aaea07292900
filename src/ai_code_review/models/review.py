from enum import Enum
from pydantic import BaseModel


class ReviewCategory(str, Enum):
    BUGFIX = "bugfix"
    FEATURE = "feature"
    STYLE = "style"
    BUILD = "build"
    GENERAL = "general"


class ReviewComment(BaseModel):
    path: str
    position: int
    body: str
