"""Batch image compression job orchestration."""
