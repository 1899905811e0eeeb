"""Entry points for daygrid (command-line interface)."""
