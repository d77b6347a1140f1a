"""Singly and doubly linked lists, list algorithms, primality and factorials."""

__version__ = "0.1.0"