# core/__init__.py

"""
Ядро дневника настроения: модели, серии, очки, достижения и аналитика.
"""
