"""Diagnostic catalog and collection."""

from propsynth.diagnostics.collector import DiagnosticCollector, merge_diagnostics
from propsynth.diagnostics import descriptors

__all__ = ["DiagnosticCollector", "merge_diagnostics", "descriptors"]
