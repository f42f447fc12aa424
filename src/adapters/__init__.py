"""Adapters: concrete implementations of `core.interfaces.probes`.

Each one wraps an external tool or library (lsof, tailscale, httpx, psutil,
qrcode) and reports failures as an absent signal.
"""
