from abc import ABC, abstractmethod
from typing import Any


class GitPlatform(ABC):
    @abstractmethod
    async def get_pr_files(self, repo: str, pr_number: int) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def get_file_content(self, repo: str, file_path: str, ref: str) -> str:
        pass

    @abstractmethod
    async def post_review(
        self,
        repo: str,
        pr_number: int,
        body: str,
        comments: list[dict[str, Any]],
        commit_id: str | None = None,
    ) -> None:
        pass
