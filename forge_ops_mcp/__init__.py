"""MCP server for managing Gitea and GitHub repositories."""
