"""Interfaces (application boundary) for TRACKLY.

Framework-free contracts shared by the service layer and adapters: the entity
store, the unit of work and the ID generator. Business rules stay out of this
package.

Dependency rule: this package does not import other `trackly.*` modules. It
may be imported by `trackly.service_layer`, `trackly.adapters` and
`trackly.bootstrap`.
"""
