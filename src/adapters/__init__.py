"""Adapters: HTTP client, payload resolution, Pinata and exporters."""
