"""Identity adapters: token issuer, password hashing, user store and auth routes."""
