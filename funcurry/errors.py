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

'''Exceptions raised by funcurry.'''


class CurryError(Exception):
    pass


class ArityExceeded(CurryError, TypeError):
    '''A curried function received more arguments than it declares.

    The message is relative to the function that was called: for a
    function that already holds `bound` arguments it reports how many
    it still accepted and how many the call supplied.

    >>> str(ArityExceeded('three', 4, 3))
    'three, expected 3 args but got 4'
    >>> err = ArityExceeded('three', 4, 3, bound=1)
    >>> str(err)
    'three, expected 2 args but got 3'
    >>> err.got, err.expected
    (4, 3)
    '''

    def __init__(self, name, got, expected, bound=0):
        self.name = name
        self.got = got
        self.expected = expected
        self.bound = bound
        super().__init__('{}, expected {} args but got {}'.format(
            name, expected - bound, got - bound))

    def __reduce__(self):
        return (type(self), (self.name, self.got, self.expected, self.bound))


class DeclarationError(CurryError, ValueError):
    'Invalid parameter declaration'
