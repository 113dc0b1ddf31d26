"""
Stores bounded context: domain layer.
"""
