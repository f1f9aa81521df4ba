"""Utility helpers for richdoc entry points."""
