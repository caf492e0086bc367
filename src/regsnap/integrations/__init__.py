"""Collaborators used by the snapshot core.

Each subpackage provides an ABC (abc.py), a production implementation (real.py)
and an in-memory fake for tests (fake.py).
"""
