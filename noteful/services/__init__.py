# Services package init
"""
Noteful API: Services Layer
=============================

What:  Validation, data access and sanitization between routes and the
       database.

Service Inventory:
    - validation.py:        field-list driven payload checks
    - sanitizer.py:         HTML-escaping of free-text output fields
    - resource_service.py:  generic CRUD contract (ResourceService) and the
                            ResolvedRecord produced by existence lookups
    - folder_service.py:    ResourceService for folders
    - note_service.py:      ResourceService for notes
"""
