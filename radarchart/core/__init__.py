"""Toolkit-independent radar chart core: scale, rings, projection, orchestration."""
