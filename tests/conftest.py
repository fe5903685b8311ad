import pytest

from couchform import Field, FieldType, Embed, EmbedList

def pytest_configure(config):
    from django.conf import settings
    if not settings.configured:
        settings.configure()

class StubWidget(object):
    """Records calls and returns fixed markup."""
    def __init__(self, type="text", markup="<input>"):
        self.type = type
        self.markup = markup
        self.calls = []
    def html(self, name, value, raw=None, field=None):
        self.calls.append((name, value, raw, field))
        return self.markup

@pytest.fixture
def stub_widget():
    return StubWidget()

@pytest.fixture
def city_field(stub_widget):
    return Field(stub_widget, required=True)

@pytest.fixture
def comment_type():
    return FieldType("comment", description="Reader feedback")

@pytest.fixture
def embed_field(comment_type):
    return Field(Embed(), type=comment_type)

@pytest.fixture
def embed_list_field(comment_type):
    return Field(EmbedList(), type=comment_type)
