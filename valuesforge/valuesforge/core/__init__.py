"""Core models, errors and the frozen values tree."""
