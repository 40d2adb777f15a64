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
Curried functions.

A curried function knows how many arguments its target needs. Calling it
with fewer returns a new curried function holding the arguments seen so far,
calling it with the remaining ones runs the target.

    >>> three = make_curried(lambda a, b, c: a + b * c, 3, 'three')
    >>> three(1, 2, 3), three(1)(2, 3), three(1)(2)(3), three(1, 2)(3)
    (7, 7, 7, 7)
    >>> three(1)
    three 1
    >>> three(1)(2, 3, 4)
    Traceback (most recent call last):
        ...
    funcurry.errors.ArityExceeded: three, expected 2 args but got 3
'''

import copy
from typing import Any, Callable, Optional, Tuple

from .composable import Composable
from .errors import ArityExceeded
from .utils import logger, display_name


def capture(value):
    '''Shallow copy of a bound argument.

    Taken when the argument is bound and again on every call that runs
    the target, so neither the caller's object nor later calls see the
    target's mutations. Objects nested inside it are shared. Objects that
    can't be copied are kept as they are.
    '''
    try:
        return copy.copy(value)
    except (TypeError, copy.Error):
        return value


class CurriedFunction(Composable):
    '''Immutable callable accumulating positional arguments for `target`.'''

    __slots__ = ('target', 'arity', 'args', 'name')

    def __init__(self, target: Callable, arity: int, args: Tuple = (),
                 name: Optional[str] = None):
        if not callable(target):
            raise TypeError('{!r} is not callable'.format(target))
        if isinstance(arity, bool) or not isinstance(arity, int):
            raise TypeError('arity must be an int, not {}'.format(
                type(arity).__name__))
        if arity < 0:
            raise ValueError('arity must be non-negative, got {}'.format(arity))
        args = tuple(args)
        # only the unapplied function may hold as many args as it takes
        if args and len(args) >= arity:
            raise ValueError('{} args bound, arity is {}'.format(len(args), arity))
        object.__setattr__(self, 'target', target)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'args', args)
        object.__setattr__(self, 'name', name)

    def __setattr__(self, attr, val):
        raise AttributeError("Can't assign values to CurriedFunction")

    def __delattr__(self, attr):
        raise AttributeError("Can't delete CurriedFunction attributes")

    def __reduce__(self):
        return (CurriedFunction, (self.target, self.arity, self.args, self.name))

    @property
    def __name__(self):
        return self.name or '__ANON__'

    @property
    def remaining(self) -> int:
        return self.arity - len(self.args)

    def __call__(self, *args, **kwargs) -> Any:
        if kwargs:
            raise TypeError('{} takes no keyword arguments'.format(self.__name__))
        got = len(self.args) + len(args)
        if got > self.arity:
            logger.debug('%s called with %d args, arity is %d',
                         self.__name__, got, self.arity)
            raise ArityExceeded(self.__name__, got, self.arity, len(self.args))
        if got == self.arity:
            logger.debug('%s invoked with %d args', self.__name__, got)
            return self.target(*map(capture, self.args), *args)
        logger.debug('%s bound %d of %d args', self.__name__, got, self.arity)
        return CurriedFunction(self.target, self.arity,
                               self.args + tuple(map(capture, args)), self.name)

    def __repr__(self):
        return ' '.join([self.__name__] + [repr(a) for a in self.args])


def make_curried(target: Callable, arity: int,
                 name: Optional[str] = None) -> CurriedFunction:
    '''Return curried version of target, expecting `arity` arguments

    `name` defaults to the target's own name.

    >>> add = make_curried(lambda a, b: a + b, 2, 'add')
    >>> add(1)(2)
    3
    >>> make_curried(lambda: 'now', 0)()
    'now'
    '''
    if name is None:
        name = display_name(target, None)
    return CurriedFunction(target, arity, (), name)
