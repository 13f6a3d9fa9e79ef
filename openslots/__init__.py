"""
openslots - weekly availability windows computed from opening and appointment events.
"""

__version__ = "0.1.0"
