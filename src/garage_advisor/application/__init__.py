# File: src/garage_advisor/application/__init__.py
"""Application layer: DTOs, evaluators and the ticket service"""
