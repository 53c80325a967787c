"""Image Vision MCP package.

Describes local image files with an Ollama vision model, confined to a set
of permitted directories, and exposes the result as MCP tools over stdio.
"""

__all__ = [
    "config",
    "errors",
    "prompts",
    "provider",
    "dispatcher",
    "security",
    "mcp",
]
