"""Core services: version arithmetic and status resolution."""
