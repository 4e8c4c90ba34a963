"""Shared fixtures and helpers for lamcps tests."""

import pytest

from lamcps.binding import fresh
from lamcps.expr import AppExp, LamExp, var, lit, lam, app
from lamcps.cont_expr import UExp, KLam, ULam, CallExp


@pytest.fixture
def names():
    """Fresh free variables, looked up by hint."""
    class Names(dict):
        def __missing__(self, hint):
            fv = self[hint] = fresh(hint)
            return fv
    return Names()


@pytest.fixture
def sample_terms(names):
    """A spread of source terms covering every constructor and nesting."""
    x, y, f, a, b = names['x'], names['y'], names['f'], names['a'], names['b']
    return [
        var(a),
        lit(42),
        lit('hello'),
        lam(x, var(x)),
        lam(x, var(a)),
        app(var(f), var(a)),
        app(app(var(f), var(a)), var(b)),
        app(var(f), app(var(f), var(a))),
        app(lam(x, var(x)), var(a)),
        lam(f, app(var(f), var(f))),
        lam(f, lam(x, app(var(f), app(var(f), var(x))))),
        app(lam(x, lam(y, app(var(y), var(x)))), lit(True)),
        app(app(lam(x, var(x)), lam(y, var(y))), app(var(f), lit(1))),
        ]


def source_lambdas(exp):
    """Count the lambdas of a source term."""
    if isinstance(exp, LamExp):
        _, body = exp.scope.unbind()
        return 1 + source_lambdas(body)
    elif isinstance(exp, AppExp):
        return source_lambdas(exp.funcExp) + source_lambdas(exp.argExp)
    return 0


def assert_tail_form(exp):
    """Check that lambda bodies are calls and call arguments are values."""
    if isinstance(exp, CallExp):
        assert isinstance(exp.argExp, UExp)
        for child in exp.children():
            assert not isinstance(child, CallExp)
            assert_tail_form(child)
    elif isinstance(exp, ULam):
        _, inner = exp.scope.unbind()
        _, body = inner.unbind()
        assert isinstance(body, CallExp)
        assert_tail_form(body)
    elif isinstance(exp, KLam):
        _, body = exp.scope.unbind()
        assert isinstance(body, CallExp)
        assert_tail_form(body)
