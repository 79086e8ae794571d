"""
Built-in commands package.

Commands are loaded from individual subdirectories, each containing an __init__.py
that registers the command using @command_registry.register().

A package under the user commands directory with the same name replaces
the builtin.
"""
