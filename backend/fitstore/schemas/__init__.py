# fitstore/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .profile import *
from .cart import *
from .admin import *
