"""
Field-level permission checks for CouchDB document updates.

Each public function here is a factory: call it (with any arguments) to get a validator,
and attach that validator to a field.  The document-update hook then calls it as

    validator(new_doc, old_doc, new_value, old_value, user_ctx)

where new_value/old_value are the field's values in the two documents and user_ctx is
CouchDB's userCtx -- either the raw JSON dict ({"name": ..., "roles": [...]}) or any
object with "name" and "roles" attributes.  A validator returns None if the write is OK,
and raises ValidationError (with a human-readable .message) if it must be rejected.
"""
import logging

from couchform.utils import as_vector, get_property_path

__all__ = ['ValidationError', 'match_username', 'uneditable', 'username_matches_field',
    'logged_in', 'has_role', 'all_of', 'any_of']

logger = logging.getLogger(__name__)

class ValidationError(ValueError):
    """Raised by a validator to reject a document write."""
    def __init__(self, message):
        super(ValidationError, self).__init__(message)
        self.message = message

def _fail(message):
    logger.debug("Rejecting document update: %s", message)
    raise ValidationError(message)

def _user_attr(user_ctx, name, default=None):
    if user_ctx is None: return default
    if hasattr(user_ctx, "keys"): return user_ctx.get(name, default)
    return getattr(user_ctx, name, default)

def _empty(x):
    return x is None or x == ""

def match_username():
    """The field must hold the current user's name.
    Anonymous users (no name) may leave the field empty."""
    def validate(new_doc, old_doc, new_value, old_value, user_ctx):
        name = _user_attr(user_ctx, "name")
        if name != new_value:
            # if both are empty-like, then consider them the same
            if not (_empty(name) and _empty(new_value)):
                _fail("Field does not match your username")
    return validate

def uneditable():
    """The field may be set when the document is created, but never changed afterwards."""
    def validate(new_doc, old_doc, new_value, old_value, user_ctx):
        if old_doc is not None and new_value != old_value:
            _fail("Field cannot be edited once created")
    return validate

def username_matches_field(path):
    """
    The current user's name must equal the value found at `path` in the new document.
    path    a single key, or a list of keys for a nested field (e.g. ["meta", "owner"])
    """
    path = list(as_vector(path))
    def validate(new_doc, old_doc, new_value, old_value, user_ctx):
        field = get_property_path(new_doc, path)
        if _user_attr(user_ctx, "name") != field:
            _fail("username does not match field: %s" % ".".join(str(p) for p in path))
    return validate

def logged_in():
    """Only named (non-anonymous) users may write the field."""
    def validate(new_doc, old_doc, new_value, old_value, user_ctx):
        if _empty(_user_attr(user_ctx, "name")):
            _fail("You must be logged in")
    return validate

def has_role(role):
    """Only users holding `role` may write the field."""
    def validate(new_doc, old_doc, new_value, old_value, user_ctx):
        if role not in as_vector(_user_attr(user_ctx, "roles") or []):
            _fail("You must have the role: %s" % role)
    return validate

def all_of(*validators):
    """Every validator must pass; the first failure is propagated."""
    def validate(*args):
        for validator in validators:
            validator(*args)
    return validate

def any_of(*validators):
    """At least one validator must pass; if none does, the last failure is propagated."""
    if not validators:
        raise ValueError("any_of() needs at least one validator")
    def validate(*args):
        err = None
        for validator in validators:
            try:
                validator(*args)
                return
            except ValidationError as ex:
                err = ex
        if err is not None: raise err
    return validate
