from lamcps.binding import (
    BoundTerm,
    VarTerm,
    LitTerm
    )
from lamcps.typs import (
    Token,
    lam_sexp,
    call_sexp
    )

__all__ = [
    'FVar',
    'FLit',
    'FLamOne',
    'FLamTwo',
    'FCallOne',
    'FCallTwo'
    ]


################################################################################
## Flat CPS expressions
################################################################################

# A single sort for lowered CPS terms: continuations become one-argument
# lambdas, user functions two-argument lambdas.

class FVar(VarTerm):
    """A variable."""

class FLit(LitTerm):
    """A literal."""

class FLamOne(BoundTerm):
    """A one-argument lambda, lowered from a continuation lambda.

    @type scope: Scope
    @param scope: Binds the value parameter in the body
    """
    _fields = ('scope',)

    def __init__(self, scope):
        self.scope = scope

    def _toSExp(self, names):
        x = names.push(self.scope.pattern)
        body = self.scope.body._toSExp(names)
        names.pop()
        return lam_sexp([Token(x, 'binder')], body)

class FLamTwo(BoundTerm):
    """A two-argument lambda, lowered from a user lambda.

    @type scope: Scope
    @param scope: Binds the value parameter in a scope binding the
        continuation parameter in the body
    """
    _fields = ('scope',)

    def __init__(self, scope):
        self.scope = scope

    def _toSExp(self, names):
        inner = self.scope.body
        x = names.push(self.scope.pattern)
        k = names.push(inner.pattern)
        body = inner.body._toSExp(names)
        names.pop()
        names.pop()
        return lam_sexp([Token(x, 'binder'), Token(k, 'cont')], body)

class FCallOne(BoundTerm):
    _fields = ('funcExp', 'argExp')

    def __init__(self, funcExp, argExp):
        self.funcExp = funcExp
        self.argExp = argExp

    def _toSExp(self, names):
        return call_sexp(self.funcExp._toSExp(names), self.argExp._toSExp(names))

class FCallTwo(BoundTerm):
    _fields = ('funcExp', 'argExp', 'contExp')

    def __init__(self, funcExp, argExp, contExp):
        self.funcExp = funcExp
        self.argExp = argExp
        self.contExp = contExp

    def _toSExp(self, names):
        return call_sexp(
            self.funcExp._toSExp(names),
            self.argExp._toSExp(names),
            self.contExp._toSExp(names)
            )
