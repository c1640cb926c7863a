"""Middleend - body rewrites shared by both output modes."""
