"""User interfaces for rpath."""
