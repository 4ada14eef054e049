"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real waiting on the clock; use the `recorded_pause` fixture.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
