"""
Noteful API: Note Service
===========================

What:  The ResourceService instance for the `notes` table.

Field Rules:
    - POST requires name, content, folder_id; modified is optional and
      falls back to the column's CURRENT_TIMESTAMP default
    - content may be an empty string on POST; name may not
    - PATCH accepts any of name, content, modified, folder_id; the
      empty-PATCH message lists name, content, folder_id
    - folder_id must name an existing folder on both POST and PATCH
"""

from noteful.models.note import Note
from noteful.services.folder_service import folder_service
from noteful.services.resource_service import ResourceService

note_service = ResourceService(
    Note,
    "Note",
    required_fields=("name", "content", "folder_id"),
    optional_fields=("modified",),
    blank_fields=("content",),
    mutable_fields=("name", "content", "modified", "folder_id"),
    text_fields=("name", "content"),
    patch_hint_fields=("name", "content", "folder_id"),
    references={"folder_id": folder_service},
)
