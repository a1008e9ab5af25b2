"""Adapters – serve composed handlers from third-party HTTP frameworks."""
