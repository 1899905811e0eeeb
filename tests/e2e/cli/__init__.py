"""End-to-end tests of the daygrid command line."""
