"""Service layer for TRACKLY.

Implements application use-cases: command handlers, read-side queries and
transaction boundaries. Calls domain functions and the interfaces.

Dependency rule: may import `trackly.domain` and `trackly.interfaces`, but not
`trackly.adapters` or `trackly.entrypoints`.
"""
