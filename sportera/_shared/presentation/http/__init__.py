"""Shared HTTP presentation helpers."""
