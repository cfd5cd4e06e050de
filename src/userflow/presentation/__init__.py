"""
userflow.presentation

Presentation package.

Responsibilities:
- Group the output formatter implementation and the view model it populates.
"""
