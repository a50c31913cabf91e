"""Utility modules for isoview."""
