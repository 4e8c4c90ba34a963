"""Tests for the binding primitives."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from lamcps.binding import (
    FreeVar,
    BoundVar,
    Binder,
    Scope,
    fresh,
    bind,
    unbind
    )
from lamcps.expr import VarExp, var, lit, lam, app
from lamcps.literals import Literal, true


class TestFresh:
    def test_same_hint_gives_distinct_variables(self):
        a = fresh('x')
        b = fresh('x')
        assert a != b
        assert a.hint == b.hint == 'x'

    def test_variables_equal_by_identity(self):
        a = fresh('x')
        assert a == FreeVar(a.uid, 'another hint')

    def test_unique_across_threads(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            fvs = list(pool.map(lambda _: fresh('t'), range(1000)))
        assert len(set(fvs)) == 1000

    def test_binder_requires_free_variable(self):
        with pytest.raises(TypeError):
            Binder(BoundVar(0, 'x'))


class TestScope:
    def test_bind_closes_occurrences(self, names):
        x = names['x']
        scope = bind(Binder(x), var(x))
        assert scope.body == VarExp(BoundVar(0, 'x'))
        assert scope.body.free_vars() == set()

    def test_other_variables_stay_free(self, names):
        x, y = names['x'], names['y']
        scope = bind(Binder(x), app(var(x), var(y)))
        assert scope.body.free_vars() == {y}

    def test_unbind_opens_with_fresh_variable(self, names):
        x = names['x']
        pattern, body = unbind(Scope(Binder(x), var(x)))
        assert pattern.fv != x
        assert pattern.hint == 'x'
        assert body == var(pattern.fv)

    def test_alpha_equivalence(self, names):
        x, y, z = names['x'], names['y'], names['z']
        assert Scope(Binder(x), var(x)) == Scope(Binder(y), var(y))
        assert Scope(Binder(x), var(z)) == Scope(Binder(y), var(z))
        assert Scope(Binder(x), var(x)) != Scope(Binder(y), var(x))

    def test_nested_scopes_distinguish_binders(self, names):
        x, y = names['x'], names['y']
        k = lam(x, lam(y, var(x)))
        assert k != lam(x, lam(y, var(y)))
        assert k == lam(y, lam(x, var(y)))

    def test_alpha_equivalent_terms_hash_alike(self, names):
        x, y = names['x'], names['y']
        assert hash(lam(x, app(var(x), lit(1)))) == hash(lam(y, app(var(y), lit(1))))

    def test_unbind_nested_scope(self, names):
        x, y = names['x'], names['y']
        pattern, body = lam(x, lam(y, app(var(x), var(y)))).scope.unbind()
        inner, inner_body = body.scope.unbind()
        assert inner_body == app(var(pattern.fv), var(inner.fv))


class TestSubstitution:
    def test_replaces_free_occurrences(self, names):
        x, a = names['x'], names['a']
        assert app(var(x), var(x)).subst(x, lit(1)) == app(lit(1), lit(1))
        assert var(a).subst(x, lit(1)) == var(a)

    def test_avoids_capture(self, names):
        x, y, z = names['x'], names['y'], names['z']
        result = lam(y, app(var(x), var(y))).subst(x, var(y))
        assert result == lam(z, app(var(y), var(z)))
        assert result.free_vars() == {y}

    def test_substitutes_under_nested_binders(self, names):
        x, y, z = names['x'], names['y'], names['z']
        term = lam(y, lam(z, app(var(x), var(y))))
        replacement = lam(z, var(z))
        assert term.subst(x, replacement) == lam(y, lam(z, app(replacement, var(y))))

    def test_occurrences(self, names):
        x, y = names['x'], names['y']
        term = app(var(x), lam(y, app(var(x), var(y))))
        assert term.occurrences(x) == 2
        assert term.occurrences(y) == 0


class TestLiterals:
    def test_equal_by_value(self):
        assert lit(42) == lit(42)
        assert lit(42) != lit(43)
        assert Literal('a') == Literal('a')

    def test_booleans_are_not_numbers(self):
        assert Literal(1) != true

    def test_printing(self):
        assert repr(Literal(True)) == '#t'
        assert repr(Literal(False)) == '#f'
        assert repr(Literal('hi')) == '"hi"'
        assert repr(Literal(None)) == '(void)'
        assert repr(Literal(2.5)) == '2.5'
