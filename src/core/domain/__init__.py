"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) for the pairing flow.
- The domain knows nothing about subprocesses, HTTP or the CLI.
"""
