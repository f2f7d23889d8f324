"""Domain layer for articlegroups.

Holds the article group record, its value objects and the domain errors.
Must not import from `articlegroups.service_layer` or `articlegroups.entrypoints`.
"""
