"""Blog API client.

A thin wrapper around the blog's REST API built on ``requests``.  It is
used by scripts and integrations (for example a static site generator
or a newsletter tool) that need to read posts or perform
administrative actions.

The client exposes one method per endpoint:

* :meth:`login` – obtain an administrator token (stored on the client).
* :meth:`list_posts`, :meth:`get_post`, :meth:`create_post`,
  :meth:`update_post`, :meth:`delete_post` – manage posts, optionally
  uploading a cover image.
* :meth:`list_post_comments`, :meth:`submit_comment`,
  :meth:`list_comments`, :meth:`approve_comment`, :meth:`delete_comment`
  – comments and moderation.
* :meth:`subscribe`, :meth:`send_contact`, :meth:`list_subscribers`,
  :meth:`list_contacts`, :meth:`get_stats`.

Every method returns a tuple ``(data, error)``: ``data`` is the parsed
JSON response on success and ``error`` is ``None``; on failure ``data``
is ``None`` and ``error`` is a dictionary with ``status_code`` and
``message``.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class BlogAPI:
    """Client for interacting with the Blog API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3001``.
                The ``/api`` prefix is added by the client.
            token: Optional administrator token.  If set, an
                ``Authorization: Bearer <token>`` header is sent with
                every request.  :meth:`login` sets it automatically.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        data: Dict[str, Any] | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Result:
        """Perform an HTTP request against ``/api<path>``.

        Error bodies of the API have the form ``{"error": <message>}``;
        the message is returned in the error dictionary.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                data=data,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _post_form(fields: Dict[str, Any]) -> Dict[str, str]:
        """Convert post fields to the string values the admin form sends."""
        form: Dict[str, str] = {}
        for key, value in fields.items():
            if value is None:
                continue
            if isinstance(value, bool):
                form[key] = "true" if value else "false"
            elif isinstance(value, (list, tuple)):
                form[key] = ",".join(value)
            else:
                form[key] = str(value)
        return form

    def _send_post(self, method: str, path: str, fields: Dict[str, Any], cover_image: Optional[str]) -> Result:
        form = self._post_form(fields)
        if not cover_image:
            return self._request(method, path, data=form)
        content_type = mimetypes.guess_type(cover_image)[0] or "application/octet-stream"
        with open(cover_image, "rb") as fh:
            files = {"coverImage": (os.path.basename(cover_image), fh, content_type)}
            return self._request(method, path, data=form, files=files)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Result:
        """Log in as administrator and remember the returned token."""
        data, error = self._request("POST", "/login", json_body={"username": username, "password": password})
        if data and data.get("token"):
            self.token = data["token"]
        return data, error

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------
    def list_posts(self, include_drafts: bool = False) -> Result:
        params = {"admin": "1"} if include_drafts else None
        return self._request("GET", "/posts", params=params)

    def get_post(self, post_id: int) -> Result:
        return self._request("GET", f"/posts/{post_id}")

    def create_post(
        self,
        *,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
        comments_enabled: bool = True,
        published: bool = True,
        cover_image: Optional[str] = None,
    ) -> Result:
        """Create a post; ``cover_image`` is a local file path to upload."""
        fields = {
            "title": title,
            "content": content,
            "excerpt": excerpt,
            "category": category,
            "tags": tags,
            "commentsEnabled": comments_enabled,
            "published": published,
        }
        return self._send_post("POST", "/posts", fields, cover_image)

    def update_post(self, post_id: int, *, cover_image: Optional[str] = None, **fields: Any) -> Result:
        """Sparse update; pass only the fields to change (camelCase keys)."""
        return self._send_post("PUT", f"/posts/{post_id}", fields, cover_image)

    def delete_post(self, post_id: int) -> Result:
        return self._request("DELETE", f"/posts/{post_id}")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    def list_post_comments(self, post_id: int) -> Result:
        return self._request("GET", f"/posts/{post_id}/comments")

    def submit_comment(self, post_id: int, author: str, content: str) -> Result:
        return self._request("POST", f"/posts/{post_id}/comments", json_body={"author": author, "content": content})

    def list_comments(self) -> Result:
        return self._request("GET", "/comments")

    def approve_comment(self, comment_id: int) -> Result:
        return self._request("PUT", f"/comments/{comment_id}/approve")

    def delete_comment(self, comment_id: int) -> Result:
        return self._request("DELETE", f"/comments/{comment_id}")

    # ------------------------------------------------------------------
    # Newsletter, contact and stats
    # ------------------------------------------------------------------
    def subscribe(self, email: str) -> Result:
        return self._request("POST", "/subscribe", json_body={"email": email})

    def send_contact(self, name: str, email: str, subject: str, message: str) -> Result:
        return self._request(
            "POST",
            "/contact",
            json_body={"name": name, "email": email, "subject": subject, "message": message},
        )

    def list_subscribers(self) -> Result:
        return self._request("GET", "/subscribers")

    def list_contacts(self) -> Result:
        return self._request("GET", "/contacts")

    def get_stats(self) -> Result:
        return self._request("GET", "/stats")
