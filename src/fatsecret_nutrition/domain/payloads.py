"""Helpers for FatSecret's single-object-or-list JSON envelopes.

FatSecret collapses a repeated element to a bare object when there is only
one of it (``{"foods": {"food": {...}}}`` instead of a one-element list).
Everything past the adapter boundary works on plain lists.
"""


def as_list(value: object) -> list:
    """Return ``value`` as a list: None -> [], object -> [object], list as-is."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def repeated_field(payload: object, container: str, item: str) -> list:
    """Extract ``payload[container][item]`` as a list, [] when absent."""
    if not isinstance(payload, dict):
        return []
    wrapper = payload.get(container)
    if not isinstance(wrapper, dict):
        return []
    return as_list(wrapper.get(item))
