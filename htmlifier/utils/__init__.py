"""
Shared utilities: exceptions, logging setup and encoding helpers
"""
