"""State/store layer.

This package is the single source of truth for how decoded sentences are
merged into the per-parser navigation state that the output layer reads.
"""
