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
Function composition.

Curried and composed functions share the `Composable` operators:

    >>> from funcurry import curry
    >>> append = curry(lambda r, l: l + r, 2)
    >>> prepend = curry(lambda l, r: l + r, 2)
    >>> ciao = append('!') << prepend('Ciao ')
    >>> ciao('Bella')
    'Ciao Bella!'
    >>> (prepend('Ciao ') >> append('!'))('Bella')
    'Ciao Bella!'
    >>> 'Bella' | prepend('Ciao ') | append('!')
    'Ciao Bella!'
'''

from functools import reduce


class Composable:
    'Mixin giving callables the composition operators'

    __slots__ = ()

    def __lshift__(self, other):
        'f << g is compose(f, g)'
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __rlshift__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(other, self)

    def __rshift__(self, other):
        'f >> g is compose(g, f)'
        if not callable(other):
            return NotImplemented
        return compose(other, self)

    def __rrshift__(self, other):
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __ror__(self, value):
        'value | f is f(value)'
        return self(value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


class ComposedFunction(Composable):
    '''outer(inner(*args))'''

    __slots__ = ('outer', 'inner')

    def __init__(self, outer, inner):
        object.__setattr__(self, 'outer', outer)
        object.__setattr__(self, 'inner', inner)

    def __setattr__(self, attr, val):
        raise AttributeError("Can't assign values to ComposedFunction")

    def __delattr__(self, attr):
        raise AttributeError("Can't delete ComposedFunction attributes")

    def __reduce__(self):
        return (ComposedFunction, (self.outer, self.inner))

    def __call__(self, *args):
        return self.outer(self.inner(*args))

    def __repr__(self):
        return '({!r} . {!r})'.format(self.outer, self.inner)


def compose(outer, inner, *funcs):
    '''Return composition of funcs, rightmost applied first

    >>> compose(str, abs)(-3)
    '3'
    >>> compose(len, str, abs)(-300)
    3
    '''
    funcs = (outer, inner) + funcs
    for f in funcs:
        if not callable(f):
            raise TypeError('{!r} is not callable'.format(f))
    return reduce(ComposedFunction, funcs)
