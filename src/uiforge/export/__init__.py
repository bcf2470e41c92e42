"""
Export package: writes generated components and starter projects to disk.
"""

from .project import (
    component_filename,
    export_document,
    export_project,
    export_to_file,
    flavor_for,
    project_files,
)

__all__ = [
    "export_document",
    "export_to_file",
    "export_project",
    "project_files",
    "component_filename",
    "flavor_for",
]
