"""
Integration Tests Package for the Garage Advisor

End-to-end scenarios across the evaluators, the ticket service and the
command line entry point.
"""
