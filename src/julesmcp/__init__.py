"""Jules MCP - delegate coding tasks to Jules from any MCP-capable assistant."""

__version__ = "0.1.0"
