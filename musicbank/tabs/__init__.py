"""MusicBank tab views."""
