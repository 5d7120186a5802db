"""Genome browsing models: coordinates, viewing windows, tracks, alignments and key handling."""

__version__ = "0.0.3"