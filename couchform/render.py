"""
Renderers and general helpers for drawing a tree of fields as HTML.

A renderer doesn't walk the field tree itself.  The forms layer does a depth-first walk
and calls, in document order:

    start()
    begin_group(path) ... end_group(path)               once per nested group
    field() / embed() / embed_list()                     once per leaf
    end()

concatenating the strings that come back.  When it's done it should append
renderer.markup.generate(), which holds any one-time client-side initialization
(e.g. the <script> that binds embed/embedList widgets).

Two layouts are provided: TableRenderer (a single <table>, one <tbody> per group)
and DivRenderer (properly nested <div>s).  Both add "level-N" CSS classes so that
stylesheets can indent nested groups.

All caller-supplied text (labels, descriptions, hints, error messages, group names)
is HTML-escaped; wrap it in couchform.html.raw() if it is already markup.
"""
import logging

from couchform.html import escape, capitalize_name
from couchform.widgets import script_tag_for_init

__all__ = ['RenderError', 'InitializationMarkup', 'Renderer', 'TableRenderer', 'DivRenderer',
    'classes', 'label_text', 'label_html', 'description_html', 'hint_html', 'error_html',
    'EMBED_INIT_NAME']

logger = logging.getLogger(__name__)

EMBED_INIT_NAME = 'built-in embed/embedList'

class RenderError(ValueError):
    """The forms layer called the renderer out of order (e.g. unbalanced groups)."""
    pass

### Helpers for individual pieces of markup ###

def error_html(errors):
    """An unordered list of error messages, or the empty string if there are none.
    Each error shows its .message if it has one, otherwise its string form."""
    if not errors: return ""
    items = "".join("<li class='error_msg'>%s</li>" % escape(getattr(err, "message", None) or err)
        for err in errors)
    return "<ul class='errors'>%s</ul>" % items

def label_text(field, name):
    """
    The text for a field's label: the custom label if one is defined,
    otherwise the name, capitalized and with underscores replaced by spaces.
    """
    label = getattr(field, "label", None)
    if label: return label
    return capitalize_name(name)

def label_html(field, name, id=None):
    return "<label for='%s'>%s</label>" % (escape(id or "id_" + name), escape(label_text(field, name)))

def description_html(obj):
    description = getattr(obj, "description", None)
    if description: return "<div class='description'>%s</div>" % escape(description)
    return ""

def hint_html(obj):
    hint = getattr(obj, "hint", None)
    if hint: return "<div class='hint'>%s</div>" % escape(hint)
    return ""

def classes(field, errors):
    """
    Default CSS class names for a field, in a fixed order:
    always 'field', then 'error' if it failed validation, then 'required' if it's required.
    """
    r = ['field']
    if errors: r.append('error')
    if getattr(field, "required", False): r.append('required')
    return r

### One-time initialization markup ###

class InitializationMarkup(object):
    """
    Markup (usually <script> tags) that widgets want emitted once at the end of a form,
    no matter how many times the widget itself appears.

    Entries are either static strings or zero-argument functions returning a string.
    The first registration under a name wins; later ones are ignored.
    One instance should cover one page: create a new one (or clear()) per request.
    Not thread-safe -- don't share an instance between concurrent renders.
    """
    def __init__(self):
        self._entries = {} # insertion-ordered
    def register(self, name, value):
        """Schedule `value` (markup, or a function producing markup) under a unique name."""
        if name in self._entries:
            logger.debug("Initialization markup %r already registered", name)
            return
        logger.debug("Registering initialization markup %r", name)
        self._entries[name] = value
    def generate(self):
        """All registered markup, in registration order, each preceded by a newline.
        Non-destructive: may be called any number of times."""
        parts = []
        for value in self._entries.values():
            if callable(value): value = value()
            parts.append("\n%s" % value)
        return "".join(parts)
    def clear(self):
        self._entries.clear()
    def __contains__(self, name):
        return name in self._entries
    def __len__(self):
        return len(self._entries)

def _embed_init_markup():
    return script_tag_for_init('kanso/embed', 'bind')

### Renderers ###

class Renderer(object):
    """
    Base class holding the traversal bookkeeping shared by all layouts.
    Subclasses supply the markup for each visit method.
    """
    def __init__(self, markup=None, id_prefix="id_"):
        """
        markup      the InitializationMarkup to register client-side setup with;
                    a fresh one is created if not given (see .markup)
        id_prefix   prefix for the id="..." attributes that labels point at
        """
        if markup is None: markup = InitializationMarkup()
        self.markup = markup
        self.id_prefix = id_prefix
        self._groups = []
    @property
    def depth(self):
        """How many groups are currently open."""
        return len(self._groups)
    def _push(self, path):
        if not path:
            raise RenderError("begin_group() needs a non-empty path")
        self._groups.append(list(path))
        return self.depth
    def _pop(self, path):
        if not self._groups:
            raise RenderError("end_group(%r) called with no open group" % (list(path),))
        if list(path) != self._groups[-1]:
            raise RenderError("end_group(%r) does not match begin_group(%r)" % (list(path), self._groups[-1]))
        self._groups.pop()
    def _check_closed(self):
        if self._groups:
            raise RenderError("end() called with %i unclosed group(s): %r" % (len(self._groups), self._groups))
    def _names(self, path):
        """The dotted HTML name, and the caption relative to the innermost open group."""
        name = ".".join(str(p) for p in path)
        # normally len(group path) == depth, unless the walk starts below the document root
        strip = len(self._groups[-1]) if self._groups else 0
        caption = " ".join(str(p) for p in path[strip:])
        return name, caption
    def _widget_html(self, field, name, value, raw):
        return field.widget.html(name, value, raw, field)
    def _register_embed(self):
        self.markup.register(EMBED_INIT_NAME, _embed_init_markup)
    def start(self):
        """Called before anything else.  Returns markup for the top of the form."""
        raise NotImplementedError()
    def begin_group(self, path):
        """
        Called when the forms layer enters a new group of fields.
        path is the list of document keys leading to the group;
        joined with dots it is the prefix of the group's HTML field names.
        """
        raise NotImplementedError()
    def end_group(self, path):
        """Called once for each begin_group(), with the same path, properly nested."""
        raise NotImplementedError()
    def field(self, field, path, value, raw, errors):
        """Called for every field that is neither an embed nor an embedList."""
        raise NotImplementedError()
    def embed(self, field, path, value, raw, errors):
        """Called for an embed field: zero documents (if not required) or one."""
        raise NotImplementedError()
    def embed_list(self, field, path, value, raw, errors):
        """Called for an embedList field, holding any number of documents."""
        raise NotImplementedError()
    def end(self):
        """Called last.  Does not reset state; call start() again before reusing the renderer."""
        raise NotImplementedError()

class TableRenderer(Renderer):
    """
    Renders a form as a single table, with <tbody> tags to represent nested field groups.
    Each group gets a "head" <tbody> holding its heading, and a "group" <tbody> for its rows,
    both tagged level-N with the nesting depth.
    """
    def start(self):
        self._groups = []
        return "<table class='render-table'>"
    def begin_group(self, path):
        css_class = "level-%i" % self._push(path)
        return ("<tbody class='head %s'><tr><th colspan='3'>%s</th></tr></tbody>"
            "<tbody class='group %s'>" % (css_class, escape(capitalize_name(path[-1])), css_class))
    def end_group(self, path):
        self._pop(path)
        return "</tbody>"
    def field(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        if field.widget.type == "hidden":
            return self._widget_html(field, name, value, raw)
        return ("<tr class='%s'>"
                "<th>%s%s</th>"
                "<td>%s%s</td>"
                "<td class='errors'>%s</td>"
            "</tr>") % (
            " ".join(classes(field, errors)),
            label_html(field, caption, self.id_prefix + name), description_html(field),
            self._widget_html(field, name, value, raw), hint_html(field),
            error_html(errors))
    def _embedded_row(self, css_class, field, name, caption, items, errors):
        return ("<tr class='%s'>"
                "<th>%s%s</th>"
                "<td class='field' rel='%s'><table rel='%s'><tbody>%s</tbody></table></td>"
                "<td class='errors'>%s</td>"
            "</tr>") % (
            css_class,
            label_html(field.type, caption, self.id_prefix + name), description_html(field.type),
            escape(field.type.name), escape(name), items,
            error_html(errors))
    def embed(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        self._register_embed()
        item = "<tr><td>%s</td><td class='actions'></td></tr>" % self._widget_html(field, name, value, raw)
        return self._embedded_row("embedded", field, name, caption, item, errors)
    def embed_list(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        self._register_embed()
        items = "".join("<tr><td>%s</td><td class='actions'></td></tr>" % self._widget_html(field, name, v, raw)
            for v in (value or []))
        return self._embedded_row("embeddedlist", field, name, caption, items, errors)
    def end(self):
        self._check_closed()
        return "</table>"

class DivRenderer(Renderer):
    """
    Renders a form using a series of properly-nested <div> tags.
    Groups are <div class='group level-N'> with a 'heading' <div> first.
    """
    def start(self):
        self._groups = []
        return "<div class='render-div'>"
    def begin_group(self, path):
        return "<div class='group level-%i'><div class='heading'>%s</div>" % (
            self._push(path), escape(capitalize_name(path[-1])))
    def end_group(self, path):
        self._pop(path)
        return "</div>"
    def _label(self, obj, name, caption):
        return "<div class='label'>%s%s</div>" % (
            label_html(obj, caption, self.id_prefix + name), description_html(obj))
    def field(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        if field.widget.type == "hidden":
            return self._widget_html(field, name, value, raw)
        return ("<div class='%s'><div class='scalar'>%s"
                "<div class='content'>"
                    "<div class='inner'>%s</div>%s"
                    "<div class='errors'>%s</div>"
                "</div>"
            "</div></div>") % (
            " ".join(classes(field, errors)), self._label(field, name, caption),
            self._widget_html(field, name, value, raw), hint_html(field),
            error_html(errors))
    def _embedded_div(self, css_class, field, name, caption, items, errors):
        return ("<div class='%s'><div class='%s'>%s"
                "<div class='content' rel='%s'>%s"
                    "<div class='errors'>%s</div>"
                "</div>"
            "</div></div>") % (
            " ".join(classes(field.type, errors)), css_class, self._label(field.type, name, caption),
            escape(field.type.name), items,
            error_html(errors))
    def embed(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        self._register_embed()
        item = "<div class='inner' rel='%s'>%s</div><div class='actions'></div>" % (
            escape(name), self._widget_html(field, name, value, raw))
        return self._embedded_div("embedded", field, name, caption, item, errors)
    def embed_list(self, field, path, value, raw, errors):
        name, caption = self._names(path)
        self._register_embed()
        items = "".join(
            "<div class='item' rel='%s'><div class='inner'>%s</div><div class='actions'></div></div>" % (
                escape(name), self._widget_html(field, name, v, raw))
            for v in (value or []))
        return self._embedded_div("embeddedlist", field, name, caption, items, errors)
    def end(self):
        self._check_closed()
        return "</div>"
