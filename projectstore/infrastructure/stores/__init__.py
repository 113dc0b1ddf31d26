"""
Infrastructure adapters for the stores bounded context.
"""
