"""Notification aggregation, filtering and per-user state tracking."""
