"""Functional tests.

Purpose
- Validate user-visible behavior through the public API, including the real
  wall-clock delays.

Guidelines
- Treat the package as a black box; no stubbing of the pause helper.
- Tests that wait on the clock carry @pytest.mark.slow.
"""
