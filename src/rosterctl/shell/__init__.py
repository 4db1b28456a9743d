"""Interactive shell: commands, the dispatcher, and the run loop."""
