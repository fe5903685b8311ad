"""
A small library of helper functions for generating HTML as text strings.

Everything that ends up inside a tag or attribute goes through escape(),
unless the caller explicitly wraps it in raw() to say "this is already markup".
Labels, descriptions and hints are usually written by developers, but error
messages and values frequently echo user input, so escaping is the default.
"""

__all__ = ['raw', 'escape', 'format_attrs', 'capitalize_name', 'to_text']

def to_text(x):
    """ Convert anything to a text string """
    return x if isinstance(x, str) else str(x)

class raw(object):
    "A simple wrapper class to mark objects that should not be escaped."
    def __init__(self, obj):
        self.obj = obj
    def __str__(self):
        return to_text(self.obj)
    def __repr__(self):
        return "raw(%r)" % (self.obj,)
    def __eq__(self, other):
        return isinstance(other, raw) and self.obj == other.obj
    def __hash__(self):
        return hash(self.obj)

def escape(obj):
    """Escape HTML special chars in the string form of obj, unless obj is wrapped in raw().

    >>> escape('<b>"Fish" & \\'Chips\\'</b>')
    '&lt;b&gt;&quot;Fish&quot; &amp; &#39;Chips&#39;&lt;/b&gt;'
    >>> escape(raw('<b>bold</b>'))
    '<b>bold</b>'
    >>> escape(None)
    ''
    """
    if obj is None: return "" # because the string "None" evaluates to True, while "" is False
    elif isinstance(obj, raw): return to_text(obj.obj)
    else: return to_text(obj).replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;').replace('"', '&quot;').replace("'", '&#39;')

def format_attrs(attrs):
    """Given a dictionary, format it to be included in an HTML tag.
    Names may include a trailing underscore to distinguish them from Python keywords (e.g. "class_"),
    and True and False may be used for logical attributes, like "checked" and "disabled".

    >>> format_attrs({'class_':'my-css-class', 'value':'<UNSAFE> & "VALUE"', 'checked':True, 'disabled':False})
    " class='my-css-class' value='&lt;UNSAFE&gt; &amp; &quot;VALUE&quot;' checked='checked'"
    """
    attr_strs = []
    for name, value in attrs.items():
        name = name.rstrip("_") # e.g. allow "class_" instead of "class"
        if value is False or value is None: continue
        elif value is True: value = escape(name)
        else: value = escape(value)
        attr_strs.append(" %s='%s'" % (name, value))
    return "".join(attr_strs)

def capitalize_name(name):
    """Turn a document key into display text: first letter upper-cased, underscores become spaces.

    >>> capitalize_name('first_name')
    'First name'
    >>> capitalize_name('')
    ''
    """
    name = to_text(name)
    return name[:1].upper() + name[1:].replace("_", " ")
