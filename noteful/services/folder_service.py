"""
Noteful API: Folder Service
=============================

What:  The ResourceService instance for the `folders` table.
"""

from noteful.models.folder import Folder
from noteful.services.resource_service import ResourceService

folder_service = ResourceService(
    Folder,
    "Folder",
    required_fields=("name",),
    mutable_fields=("name",),
    text_fields=("name",),
)
