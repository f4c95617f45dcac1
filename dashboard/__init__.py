# dashboard/__init__.py
