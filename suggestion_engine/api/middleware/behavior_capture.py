"""
Behavior Capture Middleware

Derives behavior records from successful website builder requests and hands
them to the BehaviorTracker. Recording happens after the response is built
and is never awaited by it; tracking problems never change the response.
"""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from suggestion_engine.infrastructure.services.behavior_tracker import (
    BehaviorTracker,
    TrackedAction,
)


logger = logging.getLogger(__name__)

# POST routes whose JSON body is needed for classification
BODY_MARKERS = ("/implement", "/favorite")


def _parse_body(body: Optional[bytes]) -> Optional[Dict[str, Any]]:
    """JSON object from a request body, or None if it is not one."""
    if not body:
        return {}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _split_tags(raw: Optional[str]) -> list:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def classify_request(
    method: str,
    path: str,
    query_params: Mapping[str, str],
    body: Optional[bytes] = None,
) -> Optional[TrackedAction]:
    """
    Map a request onto a behavior record.

    Rules are checked in order and the first match wins. Returns None for
    requests that carry no trackable behavior or whose body is not a JSON
    object.
    """
    method = method.upper()

    if method == "GET" and "/templates" in path:
        details: Dict[str, Any] = {}
        if query_params.get("category"):
            details["category"] = query_params["category"]
        if query_params.get("complexity"):
            details["complexity"] = query_params["complexity"]
        details["tags"] = _split_tags(query_params.get("tags"))
        return TrackedAction(
            action="view",
            item_type="template",
            item_id=query_params.get("id") or "template-list",
            item_details=details,
        )

    if method == "POST" and "/implement" in path:
        data = _parse_body(body)
        if data is None:
            logger.debug(f"[TRACKING] Skipping implement with non-object body on {path}")
            return None
        details = {
            key: data[key]
            for key in ("path", "language", "category", "complexity")
            if data.get(key) is not None
        }
        details["tags"] = data.get("tags") or []
        return TrackedAction(
            action="implement",
            item_type="template",
            item_id=str(data.get("templateId") or data.get("path") or "unknown"),
            item_details=details,
        )

    if method == "GET" and "/search" in path:
        query = query_params.get("query")
        return TrackedAction(
            action="search",
            item_type="file",
            item_id=query or "unknown-search",
            item_details={"query": query} if query else {},
        )

    if method == "POST" and "/favorite" in path:
        data = _parse_body(body)
        if data is None:
            logger.debug(f"[TRACKING] Skipping favorite with non-object body on {path}")
            return None
        return TrackedAction(
            action="favorite",
            item_type="template",
            item_id=str(data.get("templateId") or "unknown"),
            item_details=data,
        )

    return None


class BehaviorCaptureMiddleware(BaseHTTPMiddleware):
    """
    Records website builder activity for authenticated, successful requests.

    The auth dependency leaves the caller's id on ``request.state.user_id``;
    handlers that record an action themselves set
    ``request.state.behavior_recorded`` so it is not counted twice.
    """

    def __init__(
        self,
        app: ASGIApp,
        tracker: BehaviorTracker,
        path_prefix: str = "/api/website-builder",
    ):
        super().__init__(app)
        self.tracker = tracker
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if not path.startswith(self.path_prefix):
            return await call_next(request)

        body: Optional[bytes] = None
        if request.method == "POST" and any(marker in path for marker in BODY_MARKERS):
            body = await request.body()

        response = await call_next(request)

        if not 200 <= response.status_code < 300:
            return response

        user_id = getattr(request.state, "user_id", None)
        if user_id is None or getattr(request.state, "behavior_recorded", False):
            return response

        try:
            tracked = classify_request(request.method, path, request.query_params, body)
            if tracked is not None:
                self.tracker.track(user_id, tracked)
        except Exception as e:
            logger.error(f"[TRACKING] Failed to capture {request.method} {path}: {e}")

        return response
