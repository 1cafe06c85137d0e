"""StockTrack: inventory and category management API."""
