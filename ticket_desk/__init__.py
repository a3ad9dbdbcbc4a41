"""Single-user support ticket tracking with JSON snapshot persistence."""
