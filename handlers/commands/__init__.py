# handlers/commands/__init__.py
