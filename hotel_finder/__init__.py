"""Free-text hotel redemption search over a fixed in-memory dataset."""
