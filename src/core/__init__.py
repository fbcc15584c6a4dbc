"""
Core domain models and checksum primitives.

This module contains the foundational building blocks that are independent
of randomness, I/O and configuration files: the Alphabet value object,
the named pool presets and the Luhn mod N checksum.
"""
