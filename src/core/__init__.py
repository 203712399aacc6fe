"""Core layer: configuration, domain, interfaces and services."""
