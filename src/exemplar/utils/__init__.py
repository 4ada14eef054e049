"""Support namespace for cross-cutting, dependency-light helpers.

Scope:
- Small, stateless helpers with minimal dependencies.
- No business rules; prefer pure functions, and keep any unavoidable side
  effect (such as blocking on the wall clock) shallow and easy to stub in tests.
- Organize by single-purpose modules rather than one catch-all file.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
