"""Socket table inspection through `lsof`.

`lsof` exits non-zero both when nothing listens and when it lacks the
privilege to see other users' sockets, so only a positive answer is
trustworthy; everything else is inconclusive.
"""

from __future__ import annotations

from adapters.process import run_tool


class LsofSocketTable:
    def __init__(self, timeout: float = 2.0, binary: str = "lsof") -> None:
        self._timeout = timeout
        self._binary = binary

    def command(self, port: int) -> list[str]:
        return [self._binary, "-nP", f"-iTCP:{port}", "-sTCP:LISTEN"]

    def is_listening(self, port: int) -> bool | None:
        output = run_tool(self.command(port), timeout=self._timeout)
        if output is None:
            return None
        # First line is the COMMAND/PID/... header.
        rows = [line for line in output.splitlines()[1:] if line.strip()]
        return True if rows else None
