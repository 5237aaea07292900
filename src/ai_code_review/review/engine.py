# src/ai_code_review/review/engine.py
import fnmatch
import logging
import yaml
from dataclasses import dataclass
from typing import Any
from ai_code_review.platforms.github import GitHubClient
from ai_code_review.models.config import RepoConfig
from ai_code_review.models.review import ReviewComment
from .chat import Reviewer


logger = logging.getLogger(__name__)

LGTM_BODY = "LGTM 👍"


@dataclass
class EngineReviewResult:
    """Result of running review on a pull request."""
    comments_count: int
    files_reviewed: int
    skipped: bool = False


class ReviewEngine:
    def __init__(self, github: GitHubClient, reviewer: Reviewer, reviewer_name: str = "AI Review"):
        self.github = github
        self.reviewer = reviewer
        self.reviewer_name = reviewer_name

    async def review_pr(
        self,
        repo: str,
        pr_number: int,
        title: str,
        head_sha: str | None = None,
        head_ref: str | None = None,
        force: bool = False,
    ) -> EngineReviewResult:
        """Run AI review on every reviewable file of a pull request."""
        config = await self._load_config(repo, head_ref or head_sha)

        if not config.auto_review and not force:
            logger.info(f"Auto review disabled for {repo}, skipping PR #{pr_number}")
            return EngineReviewResult(comments_count=0, files_reviewed=0, skipped=True)

        files = await self.github.get_pr_files(repo, pr_number)

        comments: list[ReviewComment] = []
        files_reviewed = 0

        for change in files:
            file_path = change["filename"]
            patch = change.get("patch") or ""

            if not self._should_review(change, patch, config):
                continue

            files_reviewed += 1
            try:
                text = await self.reviewer.review(patch, title)
            except Exception as e:
                logger.error(f"LLM review failed for {file_path}: {e}")
                continue

            if text:
                comments.append(ReviewComment(
                    path=file_path,
                    position=len(patch.split("\n")) - 1,
                    body=text,
                ))

        if comments:
            body = f"Code review by {self.reviewer_name}"
        else:
            body = LGTM_BODY

        await self.github.post_review(
            repo=repo,
            pr_number=pr_number,
            body=body,
            comments=[comment.model_dump() for comment in comments],
            commit_id=head_sha,
        )

        return EngineReviewResult(
            comments_count=len(comments),
            files_reviewed=files_reviewed,
        )

    async def _load_config(self, repo: str, ref: str | None) -> RepoConfig:
        """Load .ai-review.yaml from repo or use defaults."""
        if not ref:
            return RepoConfig()

        yaml_content = await self.github.get_repo_config(repo, ref)
        if yaml_content is None:
            return RepoConfig()

        try:
            data = yaml.safe_load(yaml_content) or {}
            return RepoConfig(**data)
        except Exception as e:
            logger.warning(f"Invalid .ai-review.yaml: {e}")
            return RepoConfig()

    def _should_review(self, change: dict[str, Any], patch: str, config: RepoConfig) -> bool:
        file_path = change["filename"]

        if change.get("status") == "removed" or not patch:
            return False

        if config.include and not self._matches(file_path, config.include):
            return False

        if self._matches(file_path, config.exclude):
            return False

        if config.max_patch_length is not None and len(patch) > config.max_patch_length:
            logger.info(f"{file_path} skipped: patch too long ({len(patch)} chars)")
            return False

        return True

    def _matches(self, file_path: str, patterns: list[str]) -> bool:
        """Check if file matches any glob pattern."""
        for pattern in patterns:
            if fnmatch.fnmatch(file_path, pattern):
                return True
        return False
