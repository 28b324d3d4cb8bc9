"""Infrastructure adapters for the bankist dashboard."""
