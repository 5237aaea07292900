from pydantic import BaseModel


class GitHubUser(BaseModel):
    login: str


class GitHubRepository(BaseModel):
    id: int
    full_name: str
    html_url: str | None = None


class GitHubRef(BaseModel):
    ref: str
    sha: str


class GitHubPullRequest(BaseModel):
    number: int
    title: str
    state: str
    draft: bool = False
    body: str | None = None
    head: GitHubRef
    base: GitHubRef


class GitHubPREvent(BaseModel):
    action: str  # "opened", "synchronize", ...
    number: int
    pull_request: GitHubPullRequest
    repository: GitHubRepository
    sender: GitHubUser | None = None


class GitHubIssue(BaseModel):
    number: int
    title: str
    pull_request: dict | None = None  # present only when the issue is a PR


class GitHubComment(BaseModel):
    body: str
    user: GitHubUser | None = None


class GitHubCommentEvent(BaseModel):
    action: str  # "created", "edited", "deleted"
    issue: GitHubIssue
    comment: GitHubComment
    repository: GitHubRepository
