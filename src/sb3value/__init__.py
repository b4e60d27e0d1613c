"""
Runtime values for block project files

Values in a project are untyped. This package models them and reproduces
the block runtime's rules for turning them into numbers, text, booleans and
list positions.
"""

__version__ = "0.1.0"


from ._error import *
from ._numbers import *
from ._index import *
from ._value import *
