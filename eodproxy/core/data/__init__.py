"""Upstream data access."""
