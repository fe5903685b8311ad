"""
Plain descriptor objects for the fields a renderer is asked to draw.

Renderers only ever *read* these, through getattr() with a default,
so any object exposing the same attribute names works just as well.
"""

__all__ = ['Field', 'FieldType']

class Field(object):
    """
    widget      a couchform.widgets.Widget (or anything with .type and .html())
    label       display name; defaults to the capitalized document key
    description longer explanatory text shown beside the label
    hint        short help shown under the input
    required    adds the "required" CSS class
    type        a FieldType, for embed and embedList fields
    """
    def __init__(self, widget, label=None, description=None, hint=None, required=False, type=None):
        self.widget = widget
        self.label = label
        self.description = description
        self.hint = hint
        self.required = required
        self.type = type
    def __repr__(self):
        return "Field(%r, label=%r)" % (self.widget, self.label)

class FieldType(object):
    """Describes the kind of document held by an embed or embedList field."""
    def __init__(self, name, label=None, description=None, required=False):
        self.name = name
        self.label = label
        self.description = description
        self.required = required
    def __repr__(self):
        return "FieldType(%r)" % (self.name,)
