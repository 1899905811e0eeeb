"""DAYGRID test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The `daygrid` command line, invoked through Click's CliRunner.
- helpers/      : Shared utilities and Hypothesis strategies (no tests here).

General guidance
- Keep unit fast and deterministic; the calendar is pure computation.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, e2e (added by directory), property
"""
