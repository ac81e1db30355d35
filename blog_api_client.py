"""Blog API client.

A small wrapper around the blog REST API built on ``requests``.  It
exposes one method per endpoint:

* :meth:`BlogApiClient.add_post` – ``POST /api/post/post``
* :meth:`BlogApiClient.get_post` – ``GET /api/get/post/{id}``
* :meth:`BlogApiClient.get_comments` – ``GET /api/get/comments/{id}``
* :meth:`BlogApiClient.add_comment` – ``POST /api/post/comment``

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON response and ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for :meth:`get_comments`) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
The message is taken from the ``Message`` field of the server's
envelope when one is present.

Payloads are plain dictionaries using the wire keys, e.g.::

    client = BlogApiClient(base_url="http://localhost:8080")
    client.add_comment({
        "Id": 1, "PostId": 101, "Comment": "comment1", "Author": "author1",
        "CreationDate": "1970-01-01T03:46:40+01:00",
    })
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BlogApiClient:
    """Client for interacting with the blog API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/post/post``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
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
                    if isinstance(err_json, dict):
                        message = err_json.get("Message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def add_post(self, post: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a post.

        Returns:
            A tuple ``(ack, error)`` where ``ack`` is the server's
            ``{"Message", "Status"}`` acknowledgement.
        """
        return self._request("POST", "/api/post/post", json_body=post)

    def get_post(self, post_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single post by ID."""
        return self._request("GET", f"/api/get/post/{post_id}")

    # ------------------------------------------------------------------
    # Comment operations
    # ------------------------------------------------------------------
    def get_comments(self, post_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the comments on a post, oldest first.

        Returns:
            A tuple ``(comments, error)``.  ``comments`` is empty on
            failure.
        """
        data, error = self._request("GET", f"/api/get/comments/{post_id}")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def add_comment(self, comment: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a comment."""
        return self._request("POST", "/api/post/comment", json_body=comment)
