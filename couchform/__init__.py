from couchform.html import *
from couchform.fields import *
from couchform.widgets import *
from couchform.permissions import *
from couchform.render import *
