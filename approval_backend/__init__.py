"""
Account Approval Backend: root package.

Users register, an administrator approves or rejects them, and a templated
email goes out at each decision. This package contains the FastAPI app entry
point (main.py), API routes, use cases, domain model and the MongoDB / SMTP
infrastructure.
"""
