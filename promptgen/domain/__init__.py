"""Domain layer: pure prompt processing rules."""
