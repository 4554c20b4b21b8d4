"""Jules REST API client and wire models."""
