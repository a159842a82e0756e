"""
Ingestion layer — JSON record files to validated models.

Submodules:
  loader — load_menus(), load_rules(), load_todos()
"""
