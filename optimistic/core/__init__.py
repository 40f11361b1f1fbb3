"""Core container, outcome and cell types."""
