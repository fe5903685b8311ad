"""Django template helpers for pages that render couchform forms.

To make them available everywhere, add the module to your template engine's builtins:

  TEMPLATES = [{
      'BACKEND': 'django.template.backends.django.DjangoTemplates',
      'OPTIONS': {'builtins': ['couchform.django_tags']},
  }]

The "initialization_markup" tag emits the one-time <script> setup collected while the
form was rendered.  Put it after the form, just before </body>:

  {{ form_html|safe }}
  {% initialization_markup renderer.markup %}

The "label_text" filter gives the display label for a field, the same way the renderers do:

  <label>{{ field|label_text:"first_name" }}</label>
"""
from django import template
from django.utils.safestring import mark_safe

from couchform.render import label_text as _label_text

register = template.Library()

class InitializationMarkupNode(template.Node):
    def __init__(self, registry):
        super(InitializationMarkupNode, self).__init__()
        self.registry = template.Variable(registry)
    def render(self, context):
        # Registered markup is <script> tags by contract, so it is never escaped.
        return mark_safe(self.registry.resolve(context).generate())

@register.tag(name="initialization_markup")
def do_initialization_markup(parser, token):
    """Emits everything registered with an InitializationMarkup: {% initialization_markup renderer.markup %}"""
    try:
        tagname, registry = token.split_contents()
    except ValueError:
        raise template.TemplateSyntaxError("%r tag requires exactly one argument" % token.contents.split()[0])
    return InitializationMarkupNode(registry)

@register.filter(name="label_text")
def label_text(field, name):
    """The label a renderer would show for `field` under the document key `name`."""
    return _label_text(field, name)
