"""Shared, toolkit-independent helpers (configuration parsing)."""
