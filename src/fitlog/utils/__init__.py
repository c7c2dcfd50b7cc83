"""Utility helpers for fitlog."""
