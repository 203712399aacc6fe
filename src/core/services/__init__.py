"""Services that orchestrate adapters behind a small public API."""
