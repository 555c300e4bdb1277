"""Level packs: the text format decoder, pack container, and the process-wide cache."""
