"""Composite tree nodes with uniform rendering and mutation.

This module provides the leaf and container node classes together with helpers
for walking, counting and looking up nodes in a tree built from them.
"""
