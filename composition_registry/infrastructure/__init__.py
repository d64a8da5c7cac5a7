"""Infrastructure layer - pattern implementations and logging."""
