"""Core interfaces/abstractions.

Why:
- Define contracts (Protocol) that concrete adapters implement.
- The core depends on abstractions, not on a specific pinning service.
"""
