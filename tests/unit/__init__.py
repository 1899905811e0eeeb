"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; the flight-recorder test writes only below tmp_path.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
