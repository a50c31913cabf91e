"""Application windows for isoview."""
