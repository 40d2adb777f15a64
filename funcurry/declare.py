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
Declaring curried functions.

`curry` works out the arity of a function and hands it to `make_curried`.
The arity comes from the function's positional parameters, from an int,
or from a parameter list:

    >>> @curry
    ... def greet(greeting, greetee):
    ...     return '{} {}'.format(greeting, greetee)
    >>> hello = greet('Hello')
    >>> hello('World')
    'Hello World'
    >>> @curry('(a, b, c)')
    ... def three(*args):
    ...     return args[0] + args[1] * args[2]
    >>> three(1)(2)(3)
    7
'''

import inspect
import keyword
from typing import Tuple

from pyparsing import (  # type: ignore
    DelimitedList,
    Opt,
    ParseException,
    Suppress,
    Word,
    identbodychars,
    identchars,
)

from .curried import make_curried
from .errors import DeclarationError
from .utils import logger

POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def BNF():
    "Parameter list grammar: `a, b` or `(a, b)`"
    if hasattr(BNF, "_cache"):
        return BNF._cache

    LP = Suppress("(")
    RP = Suppress(")")
    ID = Word(identchars, identbodychars)

    params = Opt(DelimitedList(ID))
    decl = (LP + params + RP) | params

    BNF._cache = decl
    return decl


def parse_parameters(text: str) -> Tuple[str, ...]:
    '''Parameter names declared by text

    >>> parse_parameters('greeting, greetee')
    ('greeting', 'greetee')
    >>> parse_parameters('()')
    ()
    '''
    try:
        names = tuple(BNF().parse_string(text, parse_all=True))
    except ParseException as e:
        raise DeclarationError(
            "bad parameter list {!r}: {}".format(text, e)) from e
    seen = set()
    for n in names:
        if keyword.iskeyword(n):
            raise DeclarationError("{!r} is a keyword".format(n))
        if n in seen:
            raise DeclarationError("duplicate parameter {!r}".format(n))
        seen.add(n)
    logger.debug("parsed parameters %s from %r", names, text)
    return names


def signature_arity(func) -> int:
    "Number of positional parameters of func"
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise DeclarationError(
            "can't read the signature of {!r}, give the arity".format(func)) from e
    arity = 0
    for param in sig.parameters.values():
        if param.kind not in POSITIONAL:
            raise DeclarationError(
                "parameter {!r} of {!r} is not positional".format(param.name, func))
        arity += 1
    return arity


def arity_of(func, declared=None) -> int:
    if declared is None:
        return signature_arity(func)
    if isinstance(declared, str):
        return len(parse_parameters(declared))
    if isinstance(declared, int) and not isinstance(declared, bool):
        return declared
    raise TypeError("arity must be an int or a parameter list, not {}".format(
        type(declared).__name__))


def curry(func=None, declared=None, *, name=None):
    '''Return curried version of func

    Accepted forms:

        curry(func)                 arity from func's signature
        curry(func, 2)              explicit arity
        curry(func, 'a, b')         arity from a parameter list
        @curry, @curry(2), @curry('a, b'), @curry(name='f')

    >>> add = curry(lambda a, b: a + b, name='add')
    >>> add(1)
    add 1
    '''
    if func is not None and not callable(func):
        if declared is not None:
            raise TypeError("{!r} is not callable".format(func))
        func, declared = None, func

    def decorator(f):
        return make_curried(f, arity_of(f, declared), name)

    if func is None:
        return decorator
    return decorator(func)
