# dashboard/api/__init__.py
