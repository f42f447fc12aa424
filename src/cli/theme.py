"""Rich styles shared by every command (static, never mutated)."""

ERROR = "red"
SUCCESS = "bold green"
INFO = "cyan"
WARNING = "yellow"
DIM = "dim"
EMPHASIS = "bold"

CHECK = "✓"
CROSS = "✘"
WARN = "⚠"
