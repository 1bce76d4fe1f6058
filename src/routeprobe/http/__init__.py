"""Synthetic requests and body parsing."""
