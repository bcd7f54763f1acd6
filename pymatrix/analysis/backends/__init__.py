"""Backends for structural analysis."""

from pymatrix.analysis.backends.cpu import CPUCofactorBackend

__all__ = ["CPUCofactorBackend"]
