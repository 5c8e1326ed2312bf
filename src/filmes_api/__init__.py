"""Filmes API - REST resource for movies and their cinema sessions."""

__version__ = "0.1.0"
