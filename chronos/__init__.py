"""Chronos attribution and automation core."""
