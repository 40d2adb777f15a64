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

'''Curried combinators.

An endless list of repeated factors, folded into running products:

    >>> take(6, scanl(times)(10, cycle([2.5, 2, 2])))
    [10, 25.0, 50.0, 100.0, 250.0, 500.0]

The SKI trio, where S K K behaves like I:

    >>> S(K, K, 42), S(K)(K)(42), I(42)
    (42, 42, 42)
'''

import itertools

from .declare import curry


@curry
def I(x):
    return x


@curry
def K(x, y):
    return x


@curry
def S(x, y, z):
    yz = y(z)
    xz = x(z)
    return xz(yz)


@curry
def flip(f, a, b):
    'Given f, a, b returns f(b, a)'
    return f(b, a)


# we can't just use (*) like in Haskell
@curry
def times(x, y):
    return x * y


@curry
def append(r, l):
    return l + r


@curry
def prepend(l, r):
    return l + r


@curry
def cycle(items):
    'Returns a function giving the items round-robin, forever'
    items = list(items)
    if not items:
        raise ValueError("can't cycle over nothing")
    it = itertools.cycle(items)
    return lambda: next(it)


@curry
def scanl(fn, start, it):
    'Returns a function giving start, then fn(acc, it()) on each call'
    curr = start

    def _():
        nonlocal curr
        ret = curr
        curr = fn(curr, it())
        return ret
    return _


@curry
def take(count, it):
    'First count values of the function it'
    return [it() for _ in range(count)]
