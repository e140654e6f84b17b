"""
==============================================================================
Product Management System
==============================================================================

JSON file backed inventory catalog with an interactive text menu.

==============================================================================
"""

__version__ = "1.0.0"
