"""Process-wide settings (config) and password / token primitives (security)."""
