"""Conditional activation of auto-detected test extensions."""
