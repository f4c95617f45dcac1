# handlers/callbacks/__init__.py
