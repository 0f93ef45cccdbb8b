"""
Unit Tests Package for the Garage Advisor
"""
