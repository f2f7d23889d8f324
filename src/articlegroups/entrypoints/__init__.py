"""Entrypoints (inbound adapters) for articlegroups.

Expose the library to the outside world. Parse and validate inputs, call the
service layer and present results.

Dependency rule: may import `articlegroups.service_layer` and
`articlegroups.domain`.
"""
