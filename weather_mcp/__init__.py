"""MCP server exposing geocoding, weather forecast and event tools."""

__version__ = "0.1.0"
