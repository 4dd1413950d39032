"""
Core domain models, interval algebra, and contracts.

This module contains the foundational building blocks that are independent
of the notation parser and the n-tuple generator.
"""
