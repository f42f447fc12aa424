"""Run openclaw-pair from a checkout: `python -m main [--show-url | doctor ...]`.

Same entry point as the installed `openclaw-pair` script, for when the
package is not installed (src layout, so `src/` is put on the path first).
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _prefer_utf8_output() -> None:
    # The QR code uses Unicode half blocks; Windows consoles default to cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    _prefer_utf8_output()

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
