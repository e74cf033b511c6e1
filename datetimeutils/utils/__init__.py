"""
Generic utilities shared across modules.

Includes the clock abstraction and structlog logging setup.
"""
