"""Core gameplay primitives (cells, grids, and the signals moves emit).

Kept free of presentation concerns so it can be reused by renderers, tooling, and tests.
"""
