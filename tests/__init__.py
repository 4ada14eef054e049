"""EXEMPLAR test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible behavior, including the real wall-clock delays.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; the delayed operations run against the
  `recorded_pause` fixture instead of the real clock.
- Functional tests call the public API exactly as a user would and are marked
  slow when they wait on the clock.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property, slow
"""
