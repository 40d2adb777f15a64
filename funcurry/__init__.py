# Copyright 2017 Daniel Hilst Selli
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

'''
Automatically curried functions.

    >>> from funcurry import curry
    >>> @curry
    ... def add_n_to(n, val):
    ...     return n + val
    >>> add_10_to = add_n_to(10)
    >>> add_10_to(4), add_n_to(10, 4), add_n_to(10)(4)
    (14, 14, 14)
'''

from .errors import CurryError, ArityExceeded, DeclarationError
from .composable import Composable, ComposedFunction, compose
from .curried import CurriedFunction, make_curried
from .declare import curry, parse_parameters
from .combinators import I, K, S, flip, times, append, prepend, cycle, scanl, take

__version__ = '0.1.0'

__all__ = [
    'CurryError', 'ArityExceeded', 'DeclarationError',
    'Composable', 'ComposedFunction', 'compose',
    'CurriedFunction', 'make_curried',
    'curry', 'parse_parameters',
    'I', 'K', 'S', 'flip', 'times', 'append', 'prepend', 'cycle', 'scanl', 'take',
]
