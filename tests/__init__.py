"""articlegroups test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- e2e/          : The command-line interface driven through click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; a fresh manager per test.
- E2E tests assert user-observable output, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
