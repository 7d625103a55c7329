"""Default settings for invmenuutils.

Plugins can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    LOG_LEVEL = "DEBUG"
"""

# Logging settings
LOG_LEVEL = "INFO"
"""Level used by setup_logging() when none is passed explicitly."""
