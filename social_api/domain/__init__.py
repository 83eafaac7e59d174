"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (Account, Message)
- Repository interfaces
"""
