"""
Configuration loading and validation.

Provides the DateTimeSettings object holding the default zone and locale,
loaded from environment variables or injected by callers.
"""
