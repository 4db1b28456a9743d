"""Configuration: settings models, config discovery, and logging setup."""
