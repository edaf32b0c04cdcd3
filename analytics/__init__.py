"""Analytics over parsed sector analysis data."""
