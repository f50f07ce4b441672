"""Dynamically-sized bit-vectors."""
