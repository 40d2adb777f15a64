import copy
import doctest
import logging
import os
import pickle
import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest import mock

from . import (
    ArityExceeded, ComposedFunction, CurriedFunction, CurryError,
    DeclarationError, compose, curry, make_curried, parse_parameters,
    I, K, S, flip, times, append, prepend, cycle, scanl, take,
)
from . import combinators, composable, curried, declare, errors
from .utils import display_name, log_level


def load_tests(loader, tests, ignore):
    import funcurry
    for mod in (funcurry, combinators, composable, curried, declare, errors):
        tests.addTests(doctest.DocTestSuite(mod))
    return tests


def three_body(a, b, c):
    return a + b * c


class TestCurried(unittest.TestCase):
    def setUp(self):
        self.three = make_curried(three_body, 3, 'three')

    def test_full_call(self):
        self.assertEqual(self.three(1, 2, 3), three_body(1, 2, 3))

    def test_partial_application(self):
        ae = self.assertEqual
        three = self.three

        ae(three(1, 2, 3), 7)
        ae(three(1)(2, 3), 7)
        ae(three(1)(2)(3), 7)
        ae(three(1, 2)(3), 7)

    def test_partial_returns_curried(self):
        part = self.three(1)
        self.assertIsInstance(part, CurriedFunction)
        self.assertEqual(part.args, (1,))
        self.assertEqual(part.remaining, 2)
        self.assertIs(part.target, three_body)
        self.assertEqual(part.arity, 3)
        self.assertEqual(part.name, 'three')

    def test_partials_are_independent(self):
        one = self.three(1)
        self.assertEqual(one(2)(3), 7)
        self.assertEqual(one(3)(3), 10)
        self.assertEqual(one.args, (1,))

    def test_zero_args_alias(self):
        alias = self.three()
        self.assertIsInstance(alias, CurriedFunction)
        self.assertIsNot(alias, self.three)
        self.assertEqual(alias.args, ())
        self.assertEqual(alias(1, 2, 3), 7)

    def test_zero_args_repeated(self):
        self.assertEqual(self.three()()()(1)()(2)()()(3), 7)

    def test_zero_arity_invokes(self):
        calls = []
        now = make_curried(lambda: calls.append(1) or 'done', 0)
        self.assertEqual(now(), 'done')
        self.assertEqual(calls, [1])
        with self.assertRaises(ArityExceeded):
            now(1)

    def test_arity_exceeded(self):
        with self.assertRaises(ArityExceeded) as cm:
            self.three(1, 2, 3, 4)
        self.assertEqual(str(cm.exception), 'three, expected 3 args but got 4')
        self.assertEqual((cm.exception.got, cm.exception.expected), (4, 3))
        self.assertEqual(cm.exception.name, 'three')

    def test_arity_exceeded_after_partial(self):
        with self.assertRaises(ArityExceeded) as cm:
            self.three(1)(2, 3, 4)
        err = cm.exception
        self.assertEqual(str(err), 'three, expected 2 args but got 3')
        self.assertEqual((err.got, err.expected, err.bound), (4, 3, 1))

    def test_arity_exceeded_is_type_error(self):
        self.assertRaises(TypeError, self.three, 1, 2, 3, 4)
        self.assertRaises(CurryError, self.three, 1, 2, 3, 4)

    def test_retry_after_error(self):
        one = self.three(1)
        with self.assertRaises(ArityExceeded):
            one(2, 3, 4)
        self.assertEqual(one(2, 3), 7)

    def test_anonymous_name(self):
        anon = make_curried(lambda a, b: a, 2)
        with self.assertRaisesRegex(ArityExceeded, r'^__ANON__, expected 2 args but got 3$'):
            anon(1, 2, 3)

    def test_name_from_target(self):
        cf = make_curried(three_body, 3)
        self.assertEqual(cf.name, 'three_body')
        self.assertEqual(cf.__name__, 'three_body')

    def test_keyword_arguments_rejected(self):
        self.assertRaises(TypeError, self.three, 1, b=2)

    def test_make_curried_validation(self):
        self.assertRaises(TypeError, make_curried, 'nope', 1)
        self.assertRaises(TypeError, make_curried, three_body, '3')
        self.assertRaises(TypeError, make_curried, three_body, True)
        self.assertRaises(ValueError, make_curried, three_body, -1)

    def test_no_signature_check(self):
        loose = make_curried(lambda *args: sum(args), 4)
        self.assertEqual(loose(1)(2)(3, 4), 10)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.three.arity = 4
        with self.assertRaises(AttributeError):
            del self.three.args

    def test_repr(self):
        self.assertEqual(repr(self.three), 'three')
        self.assertEqual(repr(self.three(1, 'x')), "three 1 'x'")

    def test_copy_is_self(self):
        self.assertIs(copy.copy(self.three), self.three)
        self.assertIs(copy.deepcopy(self.three), self.three)

    def test_arity_exceeded_copy_and_pickle(self):
        with self.assertRaises(ArityExceeded) as cm:
            self.three(1)(2, 3, 4)
        for err in (copy.copy(cm.exception),
                    pickle.loads(pickle.dumps(cm.exception))):
            self.assertIsInstance(err, ArityExceeded)
            self.assertEqual(str(err), 'three, expected 2 args but got 3')
            self.assertEqual((err.name, err.got, err.expected, err.bound),
                             ('three', 4, 3, 1))

    def test_constructor_validation(self):
        add = lambda a, b: a + b
        self.assertRaises(ValueError, CurriedFunction, add, 2, (1, 2))
        self.assertRaises(ValueError, CurriedFunction, add, 2, (1, 2, 3))
        self.assertRaises(ValueError, CurriedFunction, add, -1)
        self.assertRaises(TypeError, CurriedFunction, add, '2')
        self.assertRaises(TypeError, CurriedFunction, 'add', 2)
        self.assertEqual(CurriedFunction(add, 2, (1,))(2), 3)
        self.assertEqual(CurriedFunction(lambda: 0, 0)(), 0)

    def test_completions_do_not_share_bound_args(self):
        push = make_curried(lambda lst, x: lst.append(x) or list(lst), 2)
        onto_empty = push([])
        self.assertEqual(onto_empty(1), [1])
        self.assertEqual(onto_empty(2), [2])
        self.assertEqual(onto_empty.args, ([],))

    def test_nested_objects_shared(self):
        inner = []
        fill = make_curried(lambda a, b: a[0].append(b), 2)
        fill([inner])(1)
        self.assertEqual(inner, [1])

    def test_final_args_alias(self):
        def fill(a, b):
            a.append(1)
            b.append(2)

        x, y = [], []
        make_curried(fill, 2)(x, y)
        self.assertEqual((x, y), ([1], [2]))

    def test_bound_args_captured(self):
        def fill(a, b):
            a.append(1)
            b.append(2)

        x, y = [], []
        make_curried(fill, 2)(x)(y)
        self.assertEqual(x, [])
        self.assertEqual(y, [2])

    def test_capture_after_bind(self):
        x = [1]
        first = make_curried(lambda a, b: a + b, 2)(x)
        x.append(2)
        self.assertEqual(first([3]), [1, 3])

    def test_uncopyable_captured_by_reference(self):
        gen = (i for i in range(3))
        pull = make_curried(lambda g, n: [next(g) for _ in range(n)], 2)
        self.assertEqual(pull(gen)(2), [0, 1])
        self.assertEqual(next(gen), 2)

    def test_threads(self):
        add = make_curried(lambda a, b: a + b, 2, 'add')
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda n: add(n)(n), range(100)))
        self.assertEqual(results, [n * 2 for n in range(100)])

    def test_debug_logging(self):
        with self.assertLogs('funcurry', level='DEBUG') as cm:
            self.three(1)(2, 3)
        self.assertIn('DEBUG:funcurry:three bound 1 of 3 args', cm.output)
        self.assertIn('DEBUG:funcurry:three invoked with 3 args', cm.output)


class TestCompose(unittest.TestCase):
    def test_compose(self):
        h = compose(str, abs)
        self.assertIsInstance(h, ComposedFunction)
        for x in (-2, 0, 5):
            self.assertEqual(h(x), str(abs(x)))

    def test_compose_many(self):
        self.assertEqual(compose(len, str, abs)(-300), 3)

    def test_compose_passes_all_args(self):
        add = make_curried(lambda a, b: a + b, 2)
        self.assertEqual(compose(str, add)(1, 2), '3')

    def test_compose_not_callable(self):
        self.assertRaises(TypeError, compose, str, 3)

    def test_deferred(self):
        three = make_curried(three_body, 3, 'three')
        h = compose(three(1), make_curried(lambda a, b: a + b, 2))
        part = h(1, 1)
        self.assertIsInstance(part, CurriedFunction)
        self.assertEqual(part.args, (1, 2))
        self.assertEqual(part(3), 7)

    def test_arity_surfaces(self):
        inc = make_curried(lambda a: a + 1, 1, 'inc')
        with self.assertRaisesRegex(ArityExceeded, 'inc, expected 1 args but got 2'):
            compose(str, inc)(1, 2)

    def test_composed_as_target(self):
        h = make_curried(compose(str, three_body), 3)
        self.assertEqual(h(1)(2)(3), '7')

    def test_operators(self):
        ciao = append('!') << prepend('Ciao ')
        self.assertEqual(ciao('Bella'), 'Ciao Bella!')
        ciao = prepend('Ciao ') >> append('!')
        self.assertEqual(ciao('Bella'), 'Ciao Bella!')
        self.assertEqual('Bella' | prepend('Ciao ') | append('!'), 'Ciao Bella!')

    def test_operators_with_plain_functions(self):
        inc = make_curried(lambda a: a + 1, 1)
        self.assertEqual((str << inc)(1), '2')
        self.assertEqual((inc << abs)(-1), 2)
        self.assertEqual((abs >> inc)(-1), 2)
        self.assertEqual((inc >> str)(1), '2')
        self.assertEqual((str << inc << abs)(-5), '6')

    def test_operators_reject_values(self):
        inc = make_curried(lambda a: a + 1, 1)
        with self.assertRaises(TypeError):
            inc << 1
        with self.assertRaises(TypeError):
            1 >> inc

    def test_repr(self):
        inc = make_curried(lambda a: a + 1, 1, 'inc')
        self.assertEqual(repr(compose(inc, inc)), '(inc . inc)')


class TestDeclare(unittest.TestCase):
    def test_signature(self):
        @curry
        def greet(greeting, greetee):
            return '{} {}'.format(greeting, greetee)

        self.assertEqual(greet.arity, 2)
        self.assertEqual(greet.name, 'greet')
        self.assertEqual(greet('Hello')('World'), 'Hello World')

    def test_explicit_arity(self):
        total = curry(lambda *args: sum(args), 3)
        self.assertEqual(total(1)(2)(3), 6)

        @curry(2)
        def pair(*args):
            return args

        self.assertEqual(pair(1)(2), (1, 2))

    def test_parameter_list(self):
        @curry('(a, b, c)')
        def three(*args):
            return three_body(*args)

        self.assertEqual(three.arity, 3)
        self.assertEqual(three(1)(2)(3), 7)
        self.assertEqual(curry(len, 'xs').arity, 1)

    def test_name_override(self):
        @curry(name='plus')
        def add(a, b):
            return a + b

        self.assertEqual(add.name, 'plus')
        self.assertRaisesRegex(ArityExceeded, '^plus,', add, 1, 2, 3)

    def test_empty_decorator_call(self):
        @curry()
        def inc(a):
            return a + 1

        self.assertEqual(inc(1), 2)

    def test_parse_parameters(self):
        ae = self.assertEqual
        ae(parse_parameters('a, b'), ('a', 'b'))
        ae(parse_parameters(' ( a ,b,c ) '), ('a', 'b', 'c'))
        ae(parse_parameters('_x1'), ('_x1',))
        ae(parse_parameters(''), ())
        ae(parse_parameters('()'), ())

    def test_bad_parameter_lists(self):
        for text in ('a b', '1a', '(a, b', 'a,', 'a, a', 'a, class', '$a'):
            with self.subTest(text=text):
                self.assertRaises(DeclarationError, parse_parameters, text)

    def test_declaration_error_is_value_error(self):
        self.assertRaises(ValueError, parse_parameters, 'a, a')

    def test_unsupported_signatures(self):
        def variadic(a, *rest):
            pass

        def kwonly(a, *, b):
            pass

        def kwargs(a, **kw):
            pass

        for f in (variadic, kwonly, kwargs):
            with self.subTest(f=f):
                self.assertRaises(DeclarationError, curry, f)

    def test_bad_arity_type(self):
        self.assertRaises(TypeError, curry, three_body, 2.5)
        self.assertRaises(TypeError, curry(2.5), three_body)
        self.assertRaises(TypeError, curry, 'a, b', 'c')


class TestCombinators(unittest.TestCase):
    def test_ski(self):
        at = self.assertTrue

        at(I(1) == 1)
        at(K(1)(2) == 1)
        at(S(K, K, 'x') == 'x')
        at(S(K)(K)(I)(3) == 3)

    def test_flip(self):
        sub = make_curried(lambda a, b: a - b, 2)
        self.assertEqual(flip(sub)(1, 10), 9)
        self.assertEqual(flip(sub, 10)(1), -9)

    def test_cycle(self):
        nxt = cycle('ab')
        self.assertEqual([nxt() for _ in range(5)], ['a', 'b', 'a', 'b', 'a'])
        self.assertRaises(ValueError, cycle, [])

    def test_scanl_take(self):
        values = take(12)(scanl(times)(10, cycle([2.5, 2, 2])))
        self.assertEqual(values[:7], [10, 25.0, 50.0, 100.0, 250.0, 500.0, 1000.0])
        self.assertEqual(len(values), 12)

    def test_append_prepend(self):
        self.assertEqual(append('!', 'hi'), 'hi!')
        self.assertEqual(prepend('hi', '!'), 'hi!')
        self.assertEqual(times(3)(4), 12)


class TestUtils(unittest.TestCase):
    def test_log_level(self):
        ae = self.assertEqual
        with mock.patch.dict(os.environ, {'FUNCURRY_LOG_LEVEL': 'debug'}):
            ae(log_level(), logging.DEBUG)
        with mock.patch.dict(os.environ, {'FUNCURRY_LOG_LEVEL': 'bogus'}):
            ae(log_level(), logging.WARNING)
        with mock.patch.dict(os.environ, {}, clear=True):
            ae(log_level(logging.ERROR), logging.ERROR)

    def test_display_name(self):
        ae = self.assertEqual
        ae(display_name(three_body), 'three_body')
        ae(display_name(lambda: 0), '__ANON__')
        ae(display_name(object(), None), None)
