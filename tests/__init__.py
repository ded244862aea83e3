"""monthspan test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- fixtures/     : Shared Hypothesis strategies (no tests here).
- helpers/      : Shared month constants (no tests here).

General guidance
- Keep unit tests fast and deterministic; the domain layer has no I/O.
- Truth tables go in `@pytest.mark.parametrize` lists next to the tests using them.
- Property-based tests live in `*_props.py` modules and get @pytest.mark.property.
"""
