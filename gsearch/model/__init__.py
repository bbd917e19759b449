"""Value objects for search problems and candidate paths."""

from gsearch.model.path import Path
from gsearch.model.problem import Problem

__all__ = ["Path", "Problem"]
