"""MCP tool surface for the Jules API."""
