"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for the liveness probe.
- Easy to swap for a stub in tests (`HttpProbe` protocol) or to drive with an
  `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

USER_AGENT = "openclaw-pair/0.1"


def build_client(
    *,
    timeout: float,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Redirects are not followed: the first response already proves liveness.
    Proxy environment variables are ignored; only loopback is ever targeted.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "*/*",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
        headers=headers,
        trust_env=False,
        transport=transport,
    )


class HttpxProbe:
    """Treats any completed HTTP response as evidence that something listens."""

    def __init__(self, timeout: float = 2.0, transport: httpx.BaseTransport | None = None) -> None:
        self._timeout = timeout
        self._transport = transport

    def responds(self, url: str) -> bool:
        # Headers are enough; the body is never read, so a streaming or
        # dripping endpoint cannot hold the check past its timeout.
        try:
            with build_client(timeout=self._timeout, transport=self._transport) as client:
                with client.stream("GET", url):
                    pass
        except httpx.HTTPError:
            return False
        return True
