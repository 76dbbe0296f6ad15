"""
Domain layer.

Pure business objects and rules, with no knowledge of persistence,
transport or configuration.
"""
