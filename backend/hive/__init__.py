"""Hex-board geometry and move-notation core for a Hive engine."""
