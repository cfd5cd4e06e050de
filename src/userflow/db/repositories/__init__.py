"""
userflow.db.repositories

Repository package.

Responsibilities:
- Group the adapters that expose storage through the `StorageGateway` port.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; request validation belongs in the orchestrator.
