# Services package init
"""
PrepNotes Backend — Services Layer
====================================

What:  Filesystem logic sitting between routes (HTTP) and the notes tree on disk.
How:   Services return schema objects and raise application exceptions;
       routes only translate them to HTTP.

Service Inventory:
    - icons:         Folder name → glyph lookup
    - tree_walker:   Recursive, sorted directory scan (shared with the generator)
    - notes_service: Folder listing, folder trees, single note resolution
"""
