"""
API layer for the account approval backend.

Exposes the public auth endpoints (register, login, me) under /api/auth and
the admin-only approval endpoints under /api/admin.
"""
