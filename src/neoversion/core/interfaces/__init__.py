"""Core interfaces.

Why:
- Structural contracts (Protocol) that concrete adapters implement.
- The core depends on these abstractions, never on httpx or logging directly.
"""
