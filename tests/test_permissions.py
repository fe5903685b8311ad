import pytest

from couchform.permissions import (ValidationError, match_username, uneditable,
    username_matches_field, logged_in, has_role, all_of, any_of)
from couchform.utils import get_property_path


class User(object):
    def __init__(self, name=None, roles=()):
        self.name = name
        self.roles = list(roles)


class TestMatchUsername:
    def test_same_name_passes(self):
        match_username()({}, None, "bob", None, {"name": "bob"})

    def test_different_name_fails(self):
        with pytest.raises(ValidationError) as exc:
            match_username()({}, None, "alice", None, {"name": "bob"})
        assert exc.value.message == "Field does not match your username"
        assert str(exc.value) == "Field does not match your username"

    def test_anonymous_with_value_fails(self):
        with pytest.raises(ValidationError):
            match_username()({}, None, "bob", None, {"name": None})

    def test_named_user_with_empty_field_fails(self):
        with pytest.raises(ValidationError):
            match_username()({}, None, "", None, {"name": "bob"})

    @pytest.mark.parametrize("name", [None, ""])
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_like_values_are_equal(self, name, value):
        match_username()({}, None, value, None, {"name": name})

    def test_missing_name_key_counts_as_anonymous(self):
        match_username()({}, None, None, None, {})

    def test_accepts_object_user_context(self):
        match_username()({}, None, "bob", None, User("bob"))


class TestUneditable:
    def test_creation_never_fails(self):
        uneditable()({"a": 1}, None, "new", "old", {"name": "bob"})

    def test_empty_old_document_still_counts_as_existing(self):
        with pytest.raises(ValidationError):
            uneditable()({"a": 2}, {}, 2, 1, {"name": "bob"})
        uneditable()({"a": 2}, {}, 2, 2, {"name": "bob"})

    def test_unchanged_value_passes(self):
        uneditable()({"a": 1}, {"a": 1}, 1, 1, {"name": "bob"})

    def test_changed_value_fails(self):
        with pytest.raises(ValidationError) as exc:
            uneditable()({"a": 2}, {"a": 1}, 2, 1, {"name": "bob"})
        assert exc.value.message == "Field cannot be edited once created"


class TestUsernameMatchesField:
    def test_nested_path(self):
        doc = {"a": {"b": "bob"}}
        username_matches_field(["a", "b"])(doc, None, None, None, {"name": "bob"})
        with pytest.raises(ValidationError) as exc:
            username_matches_field(["a", "b"])(doc, None, None, None, {"name": "alice"})
        assert exc.value.message == "username does not match field: a.b"

    def test_single_key(self):
        username_matches_field("creator")({"creator": "bob"}, None, None, None, {"name": "bob"})
        with pytest.raises(ValidationError) as exc:
            username_matches_field("creator")({"creator": "bob"}, None, None, None, {"name": "eve"})
        assert exc.value.message == "username does not match field: creator"

    def test_missing_field_only_matches_anonymous(self):
        username_matches_field(["meta", "owner"])({}, None, None, None, {"name": None})
        with pytest.raises(ValidationError):
            username_matches_field(["meta", "owner"])({}, None, None, None, {"name": "bob"})


class TestRoles:
    def test_logged_in(self):
        logged_in()({}, None, None, None, {"name": "bob"})
        with pytest.raises(ValidationError) as exc:
            logged_in()({}, None, None, None, {"name": None})
        assert exc.value.message == "You must be logged in"

    def test_has_role(self):
        has_role("_admin")({}, None, None, None, User("bob", ["_admin"]))
        with pytest.raises(ValidationError) as exc:
            has_role("_admin")({}, None, None, None, {"name": "bob", "roles": ["editor"]})
        assert exc.value.message == "You must have the role: _admin"

    def test_has_role_with_string_roles_is_not_a_substring_match(self):
        has_role("editor")({}, None, None, None, {"name": "bob", "roles": "editor"})
        with pytest.raises(ValidationError):
            has_role("dit")({}, None, None, None, {"name": "bob", "roles": "editor"})

    def test_all_of_propagates_first_failure(self):
        check = all_of(logged_in(), has_role("editor"))
        check({}, None, None, None, {"name": "bob", "roles": ["editor"]})
        with pytest.raises(ValidationError) as exc:
            check({}, None, None, None, {"name": None, "roles": []})
        assert exc.value.message == "You must be logged in"

    def test_any_of(self):
        check = any_of(has_role("_admin"), match_username())
        check({}, None, "bob", None, {"name": "bob", "roles": []})
        check({}, None, "alice", None, {"name": "bob", "roles": ["_admin"]})
        with pytest.raises(ValidationError) as exc:
            check({}, None, "alice", None, {"name": "bob", "roles": []})
        assert exc.value.message == "Field does not match your username"

    def test_any_of_needs_a_validator(self):
        with pytest.raises(ValueError):
            any_of()


class TestPropertyPath:
    def test_lists_and_dicts(self):
        doc = {"tags": [{"name": "x"}, {"name": "y"}]}
        assert get_property_path(doc, ["tags", "1", "name"]) == "y"
        assert get_property_path(doc, ["tags", 0, "name"]) == "x"

    def test_unresolvable(self):
        doc = {"tags": ["x"], "title": "hello"}
        assert get_property_path(doc, ["tags", "5"]) is None
        assert get_property_path(doc, ["tags", "first"]) is None
        assert get_property_path(doc, ["title", "0"]) is None
        assert get_property_path(None, ["a"]) is None

    def test_empty_path(self):
        doc = {"a": 1}
        assert get_property_path(doc, []) is doc
