"""
Core date/time logic: instants, zones, locales, patterns and the
DateTimeUtils function library.
"""
