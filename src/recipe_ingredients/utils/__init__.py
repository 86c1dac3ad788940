"""Utilities package for the recipe-ingredients service."""
