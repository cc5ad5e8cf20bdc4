"""Domain layer — manifest models, versions, and build modes.

This layer depends on stdlib, pydantic, and semver. File access goes
through the ``FileSystemReader`` protocol, imported for typing only.
It must never import from services, commands, output, or config.
"""
