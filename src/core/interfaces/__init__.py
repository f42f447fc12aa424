"""Core interfaces.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Inverts dependencies: the core depends on abstractions, so every probe can
  be faked in tests without real subprocesses or networks.
"""
