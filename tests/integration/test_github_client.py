# tests/integration/test_github_client.py
import json
import httpx
import pytest
from ai_code_review.platforms.github import GitHubClient


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_pr_files(httpx_mock):
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/pulls/7/files?per_page=100&page=1",
        json=[
            {
                "filename": "src/main.ts",
                "status": "modified",
                "patch": "@@ -1 +1,2 @@\n+console.log('hello')",
            }
        ],
    )

    client = GitHubClient(token="test-token")
    files = await client.get_pr_files("octo/wms", 7)

    assert len(files) == 1
    assert files[0]["filename"] == "src/main.ts"

    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == "Bearer test-token"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_pr_files_paginates(httpx_mock):
    first_page = [{"filename": f"src/f{i}.ts", "status": "added"} for i in range(100)]
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/pulls/7/files?per_page=100&page=1",
        json=first_page,
    )
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/pulls/7/files?per_page=100&page=2",
        json=[{"filename": "src/last.ts", "status": "added"}],
    )

    client = GitHubClient(token="test-token")
    files = await client.get_pr_files("octo/wms", 7)

    assert len(files) == 101
    assert files[-1]["filename"] == "src/last.ts"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_file_content(httpx_mock):
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/contents/src/main.ts?ref=feature-branch",
        text="console.log('hello world')",
    )

    client = GitHubClient(token="test-token")
    content = await client.get_file_content("octo/wms", "src/main.ts", "feature-branch")

    assert content == "console.log('hello world')"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_repo_config_missing(httpx_mock):
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/contents/.ai-review.yaml?ref=main",
        status_code=404,
    )

    client = GitHubClient(token="test-token")
    assert await client.get_repo_config("octo/wms", "main") is None


@pytest.mark.integration
@pytest.mark.asyncio
async def test_get_repo_config_server_error(httpx_mock):
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/contents/.ai-review.yaml?ref=main",
        status_code=500,
    )

    client = GitHubClient(token="test-token")
    with pytest.raises(httpx.HTTPStatusError):
        await client.get_repo_config("octo/wms", "main")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_post_review(httpx_mock):
    httpx_mock.add_response(
        url="https://api.github.com/repos/octo/wms/pulls/7/reviews",
        method="POST",
        json={"id": 1},
    )

    client = GitHubClient(token="test-token")
    await client.post_review(
        repo="octo/wms",
        pr_number=7,
        body="Code review by AI Review",
        comments=[{"path": "src/main.ts", "position": 1, "body": "Consider error handling"}],
        commit_id="abc123",
    )

    request = httpx_mock.get_request()
    assert request is not None
    payload = json.loads(request.content)
    assert payload["event"] == "COMMENT"
    assert payload["commit_id"] == "abc123"
    assert payload["comments"][0]["path"] == "src/main.ts"
