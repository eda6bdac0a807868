"""Taildrop receiver (tdrecv)

A small supervisor around ``tailscale file get``:
- resolve and create the output directory
- run the external receiver in a loop, streaming its output
- report what landed in the directory after each cycle

All transfer logic lives in the external tool; this package only babysits it.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
