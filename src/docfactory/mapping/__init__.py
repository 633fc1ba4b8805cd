"""Mapping layer — mapper compilation, factories, and sealed results."""
