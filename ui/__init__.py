# ui/__init__.py
