"""Identity application module: login, registration and the ambient principal."""
