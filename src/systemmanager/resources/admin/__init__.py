"""Recursos del área admin.

Cada módulo define un recurso (subclase de `ResourceFacet`) que cuelga de
`SystemManagerAPI.admin`.
"""

from systemmanager.resources.admin.user import User

__all__ = [
    "User",
]
