"""TRACKLY test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : One behavioral suite run against every implementation of an interface.
- integration/  : Real interactions with SQLite and Alembic migrations.
- e2e/          : The ``trackly`` CLI driven through click's CliRunner.
- fixtures/     : Shared pytest fixtures (engines, data factories); no tests here.

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- E2E asserts user-observable output and exit codes, not internals.
- Markers are applied by directory (see ``conftest.py``).
"""
