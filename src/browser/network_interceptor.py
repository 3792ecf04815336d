"""Network request interception for end-to-end tests.

This module provides the NetworkInterceptor class built on Playwright's route
API. It records requests that pass through and serves synthetic responses
described by NetworkMock records.
"""

import asyncio
import fnmatch
import json
import logging
from typing import List, Dict, Any, Optional, Tuple, Union, Callable, Awaitable
from datetime import datetime

from playwright.async_api import Route, Request, BrowserContext, Page

from src.models.browser_models import NetworkMock

logger = logging.getLogger(__name__)

RouteTarget = Union[BrowserContext, Page]
RouteHandler = Callable[[Route, Request], Awaitable[None]]


class NetworkInterceptor:
    """Intercept network requests on a page or context.

    Example:
        interceptor = NetworkInterceptor()
        await interceptor.add_mock(
            page,
            NetworkMock(url_pattern="**/api/users", body={"users": []}),
        )
    """

    def __init__(self):
        self.mocks: List[NetworkMock] = []
        self.intercepted_requests: List[Dict[str, Any]] = []
        self._routes: List[Tuple[RouteTarget, str, RouteHandler]] = []
        self._handler_mocks: Dict[RouteHandler, NetworkMock] = {}
        self._mock_call_counts: Dict[str, int] = {}

    @staticmethod
    def _mock_id(mock: NetworkMock) -> str:
        return f"{mock.url_pattern}:{mock.method.upper()}"

    def _record(self, request: Request, source: str) -> None:
        self.intercepted_requests.append(
            {
                "url": request.url,
                "method": request.method,
                "timestamp": datetime.now().isoformat(),
                "source": source,
            }
        )

    async def _register(
        self, target: RouteTarget, pattern: str, handler: RouteHandler
    ) -> None:
        await target.route(pattern, handler)
        self._routes.append((target, pattern, handler))

    async def track_requests(self, target: RouteTarget, pattern: str = "**/*") -> None:
        """Record every request matching ``pattern`` and pass it on.

        Requests fall back to earlier-registered routes (mocks included) before
        reaching the network.
        """

        async def handler(route: Route, request: Request) -> None:
            self._record(request, "track")
            await route.fallback()

        await self._register(target, pattern, handler)
        logger.debug(f"Tracking requests matching {pattern}")

    async def add_mock(self, target: RouteTarget, mock: NetworkMock) -> None:
        """Serve ``mock`` for requests matching its pattern and method."""
        mock_id = self._mock_id(mock)
        self._mock_call_counts[mock_id] = 0
        self.mocks.append(mock)

        handler = self._create_handler(mock)
        self._handler_mocks[handler] = mock
        await self._register(target, mock.url_pattern, handler)
        logger.info(f"Added mock for {mock.url_pattern} ({mock.method})")

    def _create_handler(self, mock: NetworkMock) -> RouteHandler:
        mock_id = self._mock_id(mock)

        async def handler(route: Route, request: Request) -> None:
            self._record(request, mock_id)

            if request.method.upper() != mock.method.upper():
                logger.debug(
                    f"Method mismatch for {request.url}: expected {mock.method}, "
                    f"got {request.method}"
                )
                await route.fallback()
                return

            if mock.times is not None and self._mock_call_counts[mock_id] >= mock.times:
                logger.debug(f"Mock {mock_id} exhausted after {mock.times} calls")
                await route.fallback()
                return

            self._mock_call_counts[mock_id] += 1

            if mock.abort:
                logger.debug(f"Aborting request to {request.url}")
                await route.abort()
                return

            if mock.delay_ms > 0:
                await asyncio.sleep(mock.delay_ms / 1000.0)

            await route.fulfill(
                status=mock.status,
                content_type=mock.content_type,
                headers=dict(mock.headers) or None,
                body=self._prepare_response_body(mock.body),
            )
            logger.debug(f"Fulfilled {request.url} with status {mock.status}")

        return handler

    @staticmethod
    def _prepare_response_body(body: Any) -> str:
        """JSON-encode dicts and lists, pass strings through, None becomes ''."""
        if body is None:
            return ""
        if isinstance(body, (dict, list)):
            return json.dumps(body)
        return str(body)

    async def clear_mocks(self, target: Optional[RouteTarget] = None) -> None:
        """Remove routes this interceptor registered.

        Args:
            target: Only clear routes registered on this page or context;
                every route is cleared when omitted
        """
        removed = [r for r in self._routes if target is None or r[0] is target]
        for route_target, pattern, handler in removed:
            await route_target.unroute(pattern, handler)

            mock = self._handler_mocks.pop(handler, None)
            if mock is not None:
                self.mocks.remove(mock)
        self._routes = [r for r in self._routes if r not in removed]

        remaining_ids = {self._mock_id(m) for m in self.mocks}
        self._mock_call_counts = {
            mock_id: count
            for mock_id, count in self._mock_call_counts.items()
            if mock_id in remaining_ids
        }
        logger.info(f"Cleared {len(removed)} routes, {len(self._routes)} remain")

    def get_intercepted_requests(
        self,
        url_pattern: Optional[str] = None,
        method: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return recorded requests, optionally filtered by glob and method."""
        requests = self.intercepted_requests

        if method:
            requests = [r for r in requests if r["method"].upper() == method.upper()]
        if url_pattern:
            requests = [r for r in requests if fnmatch.fnmatch(r["url"], url_pattern)]

        return requests

    def get_mock_stats(self) -> Dict[str, int]:
        """Map of ``pattern:METHOD`` to the number of fulfilled calls."""
        return dict(self._mock_call_counts)
