"""Offline tools: presets and recording."""
