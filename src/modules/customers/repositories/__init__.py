"""Customer repositories package."""
