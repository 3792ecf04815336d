"""Configuration presets and settings."""
