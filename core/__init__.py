"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions, value objects and the route gate
- Settings storage (option model, port and adapter)
- Middleware components, metrics and tracing setup
- Health views and management commands
"""
