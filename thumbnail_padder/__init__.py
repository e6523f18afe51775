"""Pad images into 16:9 thumbnails with a detected background color."""
