"""Adapters feeding and draining the import engine."""
