# Services package init
"""
QuickNotes Backend — Services Layer
=====================================

What:  Logic between routes (HTTP) and the data access layer.
How:   Services receive the Database explicitly and return schema objects.

Service Inventory:
    - NoteService: list / create / update / delete, one statement each
    - schema_service.ensure_schema: idempotent creation of the notes table
"""
