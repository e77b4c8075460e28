"""Infrastructure layer: persistence, security and logging."""
