"""Time-boxed execution of external tools.

Every failure mode (binary missing, non-zero exit, timeout, OS error,
undecodable output) is reported as None: for the caller, the signal is
simply absent.
"""

from __future__ import annotations

import subprocess
from typing import Sequence


def run_tool(args: Sequence[str], *, timeout: float) -> str | None:
    """Run `args` and return its stdout, or None when it did not succeed."""

    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired, OSError, UnicodeDecodeError):
        return None
    if result.returncode != 0:
        return None
    return result.stdout
