"""Move-intent processing helpers.

This package centralizes validation + direction handling so every input adapter
flows through the same pipeline before the movement engine runs.
"""
