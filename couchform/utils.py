"""Small helpers shared by the validation and rendering modules."""

__all__ = ['is_scalar', 'as_vector', 'get_property_path']

def is_scalar(x):
    """False if x is a list-like iterable (list, tuple, etc.), but True if x is a string or other scalar."""
    if isinstance(x, (str, bytes)): return True
    if hasattr(x, "keys") and hasattr(x, "values"): return True
    try:
        iter(x)
        return False
    except TypeError:
        return True

def as_vector(x):
    """If x is a scalar or non-indexable iterator, wrap it in a list."""
    if is_scalar(x): return [x]
    try:
        len(x)
        return x
    except TypeError:
        return list(x)

def get_property_path(obj, path):
    """
    Follow `path` (a sequence of keys) down into a nested document and return what's there.

    Mapping levels are looked up by key; list levels by integer index ("0" works too,
    since paths often come from dotted HTML names).  Anything that can't be followed
    resolves to None rather than raising.

    >>> doc = {'author': {'names': ['bob', 'robert']}}
    >>> get_property_path(doc, ['author', 'names', '1'])
    'robert'
    >>> get_property_path(doc, ['author', 'age']) is None
    True
    """
    for key in path:
        if obj is None: return None
        if hasattr(obj, "keys"):
            obj = obj.get(key)
        elif not is_scalar(obj):
            try: obj = obj[int(key)]
            except (ValueError, TypeError, IndexError, KeyError): return None
        else:
            return None
    return obj
