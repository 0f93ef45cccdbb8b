# File: src/garage_advisor/domain/__init__.py
"""Domain layer: catalog, policies, strategies and rule tables"""
