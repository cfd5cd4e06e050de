"""
userflow.services

Service layer package.

Responsibilities:
- Hold the orchestrator that owns request validation and coordinates the ports.
"""
