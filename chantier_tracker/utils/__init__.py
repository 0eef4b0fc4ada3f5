"""Shared helpers for record coercion and structured logging."""
