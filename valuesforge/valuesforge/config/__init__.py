"""Values file loading."""

from .loader import load_values, values_path

__all__ = ["load_values", "values_path"]
