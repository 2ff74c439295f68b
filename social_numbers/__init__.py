"""
Social Numbers
==============

Synthetic national identification numbers for the fictitious jurisdictions
of Northeria and Southeria.

Each number encodes a sex digit, the birth date, a random disambiguating
segment and a weighted checksum.
"""

__version__ = "0.1.0"
__author__ = "Social Numbers"
