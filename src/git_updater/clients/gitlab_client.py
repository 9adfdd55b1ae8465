"""Client for GitLab REST API operations."""

from __future__ import annotations

import base64
import json
from http import HTTPStatus
from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.git_updater.config import SCMSettings
from src.git_updater.errors import SCMError, TransportError
from src.git_updater.protocols import SCMClientProtocol
from src.git_updater.schemas import FileContent, PullRequestResult, Signature


class GitlabClient(SCMClientProtocol):
    """
    Synchronous httpx client for the GitLab v4 repository files, branches and
    merge requests APIs.

    File revision ids are the ``last_commit_id`` of the file, which GitLab
    checks when a file is updated or deleted.
    """

    def __init__(
        self,
        settings: SCMSettings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the GitLab client.

        Args:
            settings: Token, API URL and timeout for the GitLab API.
            transport: Optional httpx transport (useful for tests).
        """
        self.settings = settings
        self.base_url = settings.api_url_for("gitlab")
        self.timeout = settings.timeout_seconds
        self._transport = transport

    def get_file(self, repo: str, ref: str, path: str) -> FileContent:
        message = f"failed to get file {path} from repo {repo} ref {ref}"
        data = self._request(
            "GET", self._file_url(repo, path), message, params={"ref": ref}
        )
        try:
            body = base64.b64decode(data["content"])
            sha = data["last_commit_id"]
        except (KeyError, TypeError, ValueError) as exc:
            raise SCMError(message, response_message="malformed file response") from exc
        return FileContent(path=path, data=body, sha=sha)

    def create_branch(self, repo: str, branch: str, sha: str) -> None:
        self._request(
            "POST",
            f"{self._project_url(repo)}/repository/branches",
            f"failed to create branch {branch} in repo {repo}",
            params={"branch": branch, "ref": sha},
        )

    def get_branch_head(self, repo: str, branch: str) -> str:
        message = f"failed to get branch {branch} in repo {repo}"
        data = self._request(
            "GET",
            f"{self._project_url(repo)}/repository/branches/{quote(branch, safe='')}",
            message,
        )
        try:
            return data["commit"]["id"]
        except (KeyError, TypeError) as exc:
            raise SCMError(message, response_message="missing branch commit") from exc

    def update_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        """
        Create or update a file on ``branch``.

        GitLab has separate create and update endpoints, so the file's
        presence on the target branch decides which one is used.
        """
        error_message = f"failed to update file {path} in repo {repo} branch {branch}"
        payload = self._commit_payload(branch, message, signature)
        payload["content"] = base64.b64encode(content).decode("ascii")
        payload["encoding"] = "base64"

        method = "POST"
        if self._file_exists(repo, branch, path):
            method = "PUT"
            if previous_sha:
                payload["last_commit_id"] = previous_sha
        self._request(method, self._file_url(repo, path), error_message, json=payload)

    def delete_file(
        self,
        repo: str,
        branch: str,
        path: str,
        message: str,
        previous_sha: str,
        signature: Signature,
        content: bytes,
    ) -> None:
        payload = self._commit_payload(branch, message, signature)
        if previous_sha:
            payload["last_commit_id"] = previous_sha
        self._request(
            "DELETE",
            self._file_url(repo, path),
            f"failed to delete file {path} in repo {repo} branch {branch}",
            json=payload,
        )

    def create_pull_request(
        self, repo: str, *, title: str, body: str, source: str, target: str
    ) -> PullRequestResult:
        message = f"failed to create merge request in repo {repo}"
        data = self._request(
            "POST",
            f"{self._project_url(repo)}/merge_requests",
            message,
            json={
                "source_branch": source,
                "target_branch": target,
                "title": title,
                "description": body,
            },
        )
        try:
            return PullRequestResult(number=data["iid"], link=data["web_url"])
        except (KeyError, TypeError) as exc:
            raise SCMError(message, response_message="malformed merge request") from exc

    def _file_exists(self, repo: str, branch: str, path: str) -> bool:
        message = f"failed to check file {path} in repo {repo} branch {branch}"
        response = self._send(
            "HEAD", self._file_url(repo, path), message, params={"ref": branch}
        )
        if response.status_code == HTTPStatus.NOT_FOUND:
            return False
        self._raise_for_status(response, message)
        return True

    def _request(self, method: str, url: str, message: str, **kwargs: Any) -> Any:
        response = self._send(method, url, message, **kwargs)
        self._raise_for_status(response, message)
        if not response.content:
            return None
        try:
            return response.json()
        except json.JSONDecodeError:
            return None

    def _send(
        self, method: str, url: str, message: str, **kwargs: Any
    ) -> httpx.Response:
        try:
            with httpx.Client(
                base_url=self.base_url,
                headers=self._build_headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                return client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            raise TransportError(f"{message}: {exc}") from exc

    def _build_headers(self) -> dict[str, str]:
        token = self.settings.token
        if token is None or not token.get_secret_value():
            raise ValueError(
                "GitLab Personal Access Token not configured. Set GIT_UPDATER_SCM_TOKEN."
            )
        return {
            "PRIVATE-TOKEN": token.get_secret_value(),
            "Accept": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response, message: str) -> None:
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            raise SCMError(
                message, response.status_code, self._extract_error_message(response)
            )

    def _extract_error_message(self, response: httpx.Response) -> str:
        try:
            body = response.json()
        except json.JSONDecodeError:
            return response.text.strip()

        if isinstance(body, dict):
            detail = body.get("message") or body.get("error")
            if detail is not None:
                return detail if isinstance(detail, str) else json.dumps(detail)
        return response.text.strip()

    def _commit_payload(
        self, branch: str, message: str, signature: Signature
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"branch": branch, "commit_message": message}
        if signature.name:
            payload["author_name"] = signature.name
        if signature.email:
            payload["author_email"] = signature.email
        return payload

    def _project_url(self, repo: str) -> str:
        return f"/projects/{quote(repo, safe='')}"

    def _file_url(self, repo: str, path: str) -> str:
        return f"{self._project_url(repo)}/repository/files/{quote(path, safe='')}"
