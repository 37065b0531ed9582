"""Generator configuration."""
