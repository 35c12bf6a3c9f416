"""Blog API — per-user article store over an embedded key-value database."""
