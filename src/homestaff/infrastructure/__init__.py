"""Infrastructure layer — in-memory storage, sessions, and composition root.

May import from domain. Must never import from services, commands, or mcp.
"""
