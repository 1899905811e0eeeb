"""The daygrid command-line interface."""
