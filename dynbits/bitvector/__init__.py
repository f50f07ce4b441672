"""Manipulate dynamically-sized bit-vectors.

This module provides a resizable sequence of bits packed in bytes,
together with the common bitwise operations, logical shifts, bit counting
and a textual representation.

"""
