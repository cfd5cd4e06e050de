"""
userflow.observability

Observability package.

Responsibilities:
- Configure structured logging.
- Bind request-scoped logging context.
"""
