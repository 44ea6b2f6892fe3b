"""Agar.io-style cell game simulation."""
