# flake8: noqa

from .address import *
from .certificate import *
from .exception import *
from .governance import *
from .hash import *
from .interval import *
from .pairs import *
from .script_context import *
from .transaction import *
from .value import *

from . import contextbuilder, txbuilder
