"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP or the CLI: only upload sources,
  payloads, pin results and the errors surfaced to callers.
"""
