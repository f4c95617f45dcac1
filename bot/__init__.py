# bot/__init__.py
