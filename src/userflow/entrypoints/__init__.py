"""
userflow.entrypoints

Entry point package.

Responsibilities:
- Translate raw caller input into request payloads for the dispatch contract.
"""
