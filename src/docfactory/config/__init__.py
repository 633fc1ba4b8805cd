"""Configuration — logging setup and environment-driven settings."""
