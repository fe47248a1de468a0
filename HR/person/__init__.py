"""
Person Domain

Handles the people roster:
- Person record lifecycle (create, read, update, delete)
- Field validation and duplicate detection
- Department directory (get-or-create by name)
"""
