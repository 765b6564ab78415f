"""Default type-name derivation for JSON:API resources."""

from __future__ import annotations

_IRREGULAR = {
    "people": "person",
    "children": "child",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "data": "datum",
}

_SIBILANT_ENDINGS = ("sses", "shes", "ches", "xes", "zes")


def singularize(field_name: str) -> str:
    """Return the lowercase singular form of a field or collection name.

    Only regular English plurals are handled (``books`` -> ``book``,
    ``categories`` -> ``category``, ``addresses`` -> ``address``). Names that
    are already singular are returned lowercased. Pass a different callable
    as ``name_for_field`` to the serializer for anything smarter.
    """
    name = field_name.lower()
    if name in _IRREGULAR:
        return _IRREGULAR[name]
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith(_SIBILANT_ENDINGS):
        return name[:-2]
    if name.endswith("s") and not name.endswith(("ss", "us", "is")):
        return name[:-1]
    return name
