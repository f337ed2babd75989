"""
Built-in abbr verbs.

Each verb lives in its own subdirectory whose __init__.py defines the
parsed command type and registers its handler with
``@command_registry.register()``.
"""
