"""
TalentFlow evaluation scoring platform.
"""

__version__ = "1.0.0"
