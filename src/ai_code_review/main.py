# src/ai_code_review/main.py
import re
import hmac
import hashlib
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, Header, HTTPException, BackgroundTasks, Request
from pydantic import BaseModel, model_validator

from ai_code_review.config import Settings
from ai_code_review.models.config import ChatConfig
from ai_code_review.models.webhook import GitHubPREvent, GitHubCommentEvent
from ai_code_review.platforms.github import GitHubClient
from ai_code_review.review.chat import Reviewer
from ai_code_review.review.engine import ReviewEngine


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PR_ACTIONS = ("opened", "reopened", "synchronize")
REVIEW_COMMAND = "/review"


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_reviewer() -> Reviewer:
    settings = get_settings()
    return Reviewer(
        api_key=settings.openai_api_key,
        config=ChatConfig.from_settings(settings),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger("ai_code_review").setLevel(get_settings().log_level)
    logger.info("AI Code Review starting...")
    yield
    logger.info("AI Code Review shutting down...")


app = FastAPI(title="AI Code Review", lifespan=lifespan)


class WebhookResponse(BaseModel):
    status: str
    message: str | None = None


class ReviewRequest(BaseModel):
    url: str | None = None
    repo: str | None = None
    pr_number: int | None = None

    @model_validator(mode="after")
    def check_params(self):
        if not self.url and not (self.repo and self.pr_number):
            raise ValueError("Either url or repo+pr_number required")
        return self


class ReviewResponse(BaseModel):
    status: str
    repo: str | None = None
    pr_number: int | None = None
    comments_posted: int | None = None
    files_reviewed: int | None = None
    error: str | None = None


def parse_github_pr_url(url: str) -> tuple[str, int]:
    """Parse GitHub PR URL -> (owner/repo, pr_number)."""
    match = re.match(r"https?://[^/]+/([^/]+/[^/]+)/pull/(\d+)", url)
    if not match:
        raise ValueError(f"Invalid GitHub PR URL: {url}")
    return match.group(1), int(match.group(2))


def verify_signature(secret: str, body: bytes, signature: str) -> bool:
    """Check the X-Hub-Signature-256 header against the raw request body."""
    expected = "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature)


def get_engine(settings: Settings) -> ReviewEngine:
    github = GitHubClient(token=settings.github_token, base_url=settings.github_api_url)
    return ReviewEngine(github=github, reviewer=get_reviewer(), reviewer_name=settings.reviewer_name)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/webhook/github", response_model=WebhookResponse)
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    x_github_event: str = Header(...),
    x_hub_signature_256: str = Header(...),
):
    settings = get_settings()

    body = await request.body()
    if not verify_signature(settings.github_webhook_secret, body, x_hub_signature_256):
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    payload = await request.json()

    if x_github_event == "pull_request":
        event = GitHubPREvent(**payload)
        pr = event.pull_request

        if event.action in PR_ACTIONS and not pr.draft:
            background_tasks.add_task(
                run_review,
                repo=event.repository.full_name,
                pr_number=pr.number,
                title=pr.title,
                head_sha=pr.head.sha,
                head_ref=pr.head.ref,
            )
            return WebhookResponse(status="accepted", message="Review scheduled")

    elif x_github_event == "issue_comment":
        event = GitHubCommentEvent(**payload)

        if (
            event.action == "created"
            and event.issue.pull_request is not None
            and REVIEW_COMMAND in event.comment.body
        ):
            background_tasks.add_task(
                run_command_review,
                repo=event.repository.full_name,
                pr_number=event.issue.number,
            )
            return WebhookResponse(status="accepted", message="Review scheduled")

    return WebhookResponse(status="ignored", message="Event not relevant")


@app.post("/api/review", response_model=ReviewResponse)
async def trigger_review(request: ReviewRequest):
    """Manually trigger a review for a pull request."""
    settings = get_settings()
    github = GitHubClient(token=settings.github_token, base_url=settings.github_api_url)

    try:
        if request.url:
            repo, pr_number = parse_github_pr_url(request.url)
        else:
            repo = request.repo
            pr_number = request.pr_number

        pr_info = await github.get_pr_info(repo, pr_number)

        engine = ReviewEngine(github=github, reviewer=get_reviewer(), reviewer_name=settings.reviewer_name)
        result = await engine.review_pr(
            repo=repo,
            pr_number=pr_number,
            title=pr_info.get("title") or "",
            head_sha=pr_info["head"]["sha"],
            head_ref=pr_info["head"]["ref"],
            force=True,
        )

        return ReviewResponse(
            status="completed",
            repo=repo,
            pr_number=pr_number,
            comments_posted=result.comments_count,
            files_reviewed=result.files_reviewed,
        )

    except ValueError as e:
        return ReviewResponse(status="error", error=str(e))
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        return ReviewResponse(status="error", error=str(e))


async def run_review(
    repo: str,
    pr_number: int,
    title: str,
    head_sha: str,
    head_ref: str,
    force: bool = False,
):
    """Background task to run the review."""
    settings = get_settings()
    engine = get_engine(settings)

    try:
        result = await engine.review_pr(
            repo=repo,
            pr_number=pr_number,
            title=title,
            head_sha=head_sha,
            head_ref=head_ref,
            force=force,
        )
        logger.info(f"Review completed for {repo}#{pr_number}: {result.comments_count} comments")
    except Exception as e:
        logger.exception(f"Review failed for {repo}#{pr_number}: {e}")


async def run_command_review(repo: str, pr_number: int):
    """Background task for a /review comment; the comment event carries no head ref."""
    settings = get_settings()
    github = GitHubClient(token=settings.github_token, base_url=settings.github_api_url)

    try:
        pr_info = await github.get_pr_info(repo, pr_number)
    except Exception as e:
        logger.exception(f"Could not load {repo}#{pr_number}: {e}")
        return

    await run_review(
        repo=repo,
        pr_number=pr_number,
        title=pr_info.get("title") or "",
        head_sha=pr_info["head"]["sha"],
        head_ref=pr_info["head"]["ref"],
        force=True,
    )
