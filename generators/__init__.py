"""
Generators module - License key generator management.

This module handles:
- Generator entity and domain logic
- Generator repository (port)
- Generator infrastructure (Django ORM adapters)
- Generator commands, queries and handlers
"""
