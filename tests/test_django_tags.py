import pytest
from django.template import Context, Engine, TemplateSyntaxError

from couchform.fields import Field
from couchform.html import raw
from couchform.render import InitializationMarkup
from couchform.widgets import TextInput


@pytest.fixture
def engine():
    return Engine(builtins=["couchform.django_tags"])


def test_initialization_markup_is_not_escaped(engine):
    markup = InitializationMarkup()
    markup.register("a", "<script>a()</script>")
    markup.register("b", lambda: "<script>b()</script>")
    t = engine.from_string("<form></form>{% initialization_markup markup %}")
    assert t.render(Context({"markup": markup})) == \
        "<form></form>\n<script>a()</script>\n<script>b()</script>"


def test_initialization_markup_resolves_attributes(engine):
    class Holder(object):
        pass
    holder = Holder()
    holder.markup = InitializationMarkup()
    holder.markup.register("x", "<script></script>")
    t = engine.from_string("{% initialization_markup renderer.markup %}")
    assert t.render(Context({"renderer": holder})) == "\n<script></script>"


def test_initialization_markup_requires_argument(engine):
    with pytest.raises(TemplateSyntaxError):
        engine.from_string("{% initialization_markup %}")


def test_label_text_filter(engine):
    t = engine.from_string('{{ field|label_text:"first_name" }}')
    assert t.render(Context({"field": Field(TextInput())})) == "First name"
    assert t.render(Context({"field": Field(TextInput(), label="Tom & Jerry")})) == "Tom &amp; Jerry"
    assert t.render(Context({"field": Field(TextInput(), label=raw("x"))})) == "x"
