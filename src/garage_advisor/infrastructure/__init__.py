# File: src/garage_advisor/infrastructure/__init__.py
"""Infrastructure layer: factories and reference data"""
