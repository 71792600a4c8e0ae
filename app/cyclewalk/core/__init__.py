"""Core infrastructure for cyclewalk: paths and theming."""
