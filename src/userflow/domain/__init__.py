"""
userflow.domain

Domain package.

Responsibilities:
- Group the value types and error taxonomy shared by every layer.
"""

# Package marker; domain types are imported directly from submodules.
