"""Core services.

Why:
- Each step of the pairing flow lives in its own module, with no printing.
- The CLI only wires adapters into `pairing_pipeline` and renders results.
"""
