"""Infrastructure layer — file access.

This layer depends on stdlib only and raises the errors defined in
:mod:`pkgmanifest.errors`. It must never import from domain, services,
commands, or output.
"""
