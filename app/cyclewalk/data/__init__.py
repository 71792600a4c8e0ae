"""Bundled data files for cyclewalk."""
