"""Gateway liveness detection.

Two independent strategies, in order, stopping at the first positive answer:
1. the OS socket table (may be inconclusive without elevated privileges);
2. an HTTP request to the loopback port, where any response counts.

`is_running` never raises: every failure collapses to False.
"""

from __future__ import annotations

from typing import Callable

from core.interfaces.probes import HttpProbe, SocketTableQuery


def gateway_url(port: int) -> str:
    return f"http://127.0.0.1:{port}/"


class GatewayProbe:
    def __init__(
        self,
        socket_table: SocketTableQuery,
        http: HttpProbe,
        *,
        debug: Callable[[str], None] | None = None,
    ) -> None:
        self._socket_table = socket_table
        self._http = http
        self._debug = debug or (lambda _msg: None)

    def check_socket_table(self, port: int) -> bool | None:
        try:
            return self._socket_table.is_listening(port)
        except Exception as exc:
            self._debug(f"socket table query failed: {exc}")
            return None

    def check_http(self, port: int) -> bool:
        try:
            return bool(self._http.responds(gateway_url(port)))
        except Exception as exc:
            self._debug(f"HTTP probe failed: {exc}")
            return False

    def is_running(self, port: int) -> bool:
        listening = self.check_socket_table(port)
        self._debug(f"socket table on port {port}: {listening}")
        if listening is True:
            return True

        responded = self.check_http(port)
        self._debug(f"HTTP probe {gateway_url(port)}: {responded}")
        return responded
