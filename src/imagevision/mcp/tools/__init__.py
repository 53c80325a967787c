"""Tool and resource registrations for the MCP server."""
