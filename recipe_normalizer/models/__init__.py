"""Pydantic models for recipes and the tag taxonomy."""
