"""Output rendering: Rich console factory, renderers, and formatters."""
