"""FastMCP servers for statsctl."""
