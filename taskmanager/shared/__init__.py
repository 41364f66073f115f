"""Shared utilities and cross-cutting helpers (logging, datetime, ids)."""
