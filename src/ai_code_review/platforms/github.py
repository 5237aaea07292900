from typing import Any
from urllib.parse import quote
import httpx
from .base import GitPlatform


PER_PAGE = 100


class GitHubClient(GitPlatform):
    def __init__(self, token: str, base_url: str = "https://api.github.com"):
        self.token = token
        self.base_url = base_url.rstrip("/")

    def _headers(self, accept: str = "application/vnd.github+json") -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": accept,
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def get_pr_info(self, repo: str, pr_number: int) -> dict[str, Any]:
        """Get PR info including title and head ref/sha."""
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.base_url}/repos/{repo}/pulls/{pr_number}",
                headers=self._headers(),
                timeout=30.0,
            )
            response.raise_for_status()
            return response.json()

    async def get_pr_files(self, repo: str, pr_number: int) -> list[dict[str, Any]]:
        files: list[dict[str, Any]] = []
        page = 1
        async with httpx.AsyncClient() as client:
            while True:
                response = await client.get(
                    f"{self.base_url}/repos/{repo}/pulls/{pr_number}/files",
                    params={"per_page": PER_PAGE, "page": page},
                    headers=self._headers(),
                    timeout=30.0,
                )
                response.raise_for_status()
                batch = response.json()
                files.extend(batch)
                if len(batch) < PER_PAGE:
                    break
                page += 1
        return files

    async def get_file_content(self, repo: str, file_path: str, ref: str) -> str:
        encoded_path = quote(file_path)
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.base_url}/repos/{repo}/contents/{encoded_path}",
                params={"ref": ref},
                headers=self._headers(accept="application/vnd.github.raw+json"),
                timeout=30.0,
            )
            response.raise_for_status()
            return response.text

    async def get_repo_config(self, repo: str, ref: str) -> str | None:
        """Get .ai-review.yaml content, returns None if not found."""
        try:
            return await self.get_file_content(repo, ".ai-review.yaml", ref)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise

    async def post_review(
        self,
        repo: str,
        pr_number: int,
        body: str,
        comments: list[dict[str, Any]],
        commit_id: str | None = None,
    ) -> None:
        payload: dict[str, Any] = {
            "body": body,
            "event": "COMMENT",
            "comments": comments,
        }
        if commit_id:
            payload["commit_id"] = commit_id

        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.base_url}/repos/{repo}/pulls/{pr_number}/reviews",
                headers=self._headers(),
                json=payload,
                timeout=30.0,
            )
            response.raise_for_status()
