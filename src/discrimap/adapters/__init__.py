"""Metadata provider adapters."""
