"""
Widgets turn one field value into the HTML for its input control.

The set of built-in widgets is small and fixed (text, hidden, embed, embedList);
new kinds are added by subclassing Widget and implementing html().
The "type" tag is what renderers look at -- "hidden" widgets are emitted bare,
without a label, hint or error list.
"""
import json

from couchform.html import escape, format_attrs

__all__ = ['Widget', 'TextInput', 'HiddenInput', 'Embed', 'EmbedList', 'script_tag_for_init']

class Widget(object):
    """Abstract base object for all widgets."""
    type = None
    def __init__(self, id_prefix="id_", **kwargs):
        """
        id_prefix   prepended to the HTML name to make the id="..." attribute
        **kwargs    any HTML attributes that should be included, e.g. disabled=True, class_='my-css-style'
        """
        self.id_prefix = id_prefix
        self.attrs = kwargs
    def html(self, name, value, raw=None, field=None):
        """Render the control as an HTML string.
        name    the dotted HTML name for the field
        value   the parsed value from the document
        raw     the value as last submitted, if any (preferred for redisplay)
        field   the Field descriptor being rendered
        """
        raise NotImplementedError()
    def __repr__(self):
        return "%s()" % self.__class__.__name__

class TextInput(Widget):
    type = "text"
    def html(self, name, value, raw=None, field=None):
        shown = raw if raw is not None else value
        return "<input type='text' id='%s%s' name='%s' value='%s'%s />" % (
            self.id_prefix, escape(name), escape(name), escape(shown), format_attrs(self.attrs))

class HiddenInput(Widget):
    type = "hidden"
    def html(self, name, value, raw=None, field=None):
        shown = raw if raw is not None else value
        return "<input type='hidden' id='%s%s' name='%s' value='%s'%s />" % (
            self.id_prefix, escape(name), escape(name), escape(shown), format_attrs(self.attrs))

class Embed(Widget):
    """Holds one embedded document, serialized as JSON in a hidden input.
    Client-side code (see script_tag_for_init) provides the editing UI."""
    type = "embed"
    def html(self, name, value, raw=None, field=None):
        data = "" if value is None else json.dumps(value, sort_keys=True)
        return "<input type='hidden' class='embedded' id='%s%s' name='%s' value='%s'%s />" % (
            self.id_prefix, escape(name), escape(name), escape(data), format_attrs(self.attrs))

class EmbedList(Embed):
    """Renders one element of an embedList field; the renderer calls it once per element."""
    type = "embedList"

def script_tag_for_init(require_path, fn_name, options=None):
    """
    Build a <script> tag that calls require(require_path)[fn_name](options) once the page has loaded.
    Widgets register these via InitializationMarkup so they are emitted only once per form.
    """
    options_json = json.dumps(options or {}, sort_keys=True)
    return (
        "<script type='text/javascript'>\n"
        "// <![CDATA[\n"
        "setTimeout(function () {\n"
        "    require(%s).%s(%s);\n"
        "}, 0);\n"
        "// ]]>\n"
        "</script>" % (json.dumps(require_path), fn_name, options_json)
    )
