"""
Application layer.

Commands, queries and their handlers, the dispatcher pipeline, and the ports
(repository, unit of work, token issuer, user store) implemented by
infrastructure.
"""
