"""Custom exception classes for Jules MCP."""


class JulesMCPError(Exception):
    """Base exception for Jules MCP errors."""

    def __init__(self, message: str, code: str = "internal"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigError(JulesMCPError):
    """Required configuration is missing or invalid."""

    def __init__(self, message: str):
        super().__init__(message, code="config")
