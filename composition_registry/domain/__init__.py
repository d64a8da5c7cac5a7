"""Domain layer - capability ports and exceptions shared by all patterns."""
