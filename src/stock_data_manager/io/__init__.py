"""Input adapters (raw bar sources)."""
