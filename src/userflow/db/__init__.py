"""
userflow.db

Storage package.

Responsibilities:
- Group the in-memory store and the repositories that adapt it to the storage gateway.
"""

# Package marker; storage types are imported directly from submodules.
