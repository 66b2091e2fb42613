# Routes package init
"""
QuickNotes Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /api/notes        (list)
                  POST   /api/notes        (create)
                  PUT    /api/notes/{id}   (update)
                  DELETE /api/notes/{id}   (delete)
    - setup.py:   GET    /api/setup        (create the notes table)
    - health.py:  GET    /health           (service health check)
    - ui.py:      GET    /                 (notes page)
                  POST   /notes, /notes/{id}, /notes/{id}/delete  (page forms)

Design Principle:
    Routes are THIN: extract input, call a service, return the result.
    Errors are turned into responses by the handlers in main.py.
"""
