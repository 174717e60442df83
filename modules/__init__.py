"""
Feature modules for the login-app backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- exceptions.py: Module-specific exceptions
- service.py / store.py: Implementation of the interface

Modules communicate through interfaces, not concrete implementations.
"""
