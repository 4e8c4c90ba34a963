from lamcps.binding import (
    BoundTerm,
    VarTerm,
    LitTerm,
    Binder,
    Scope
    )
from lamcps.literals import Literal
from lamcps.typs import (
    Token,
    lam_sexp,
    call_sexp
    )

__all__ = [
    'AtomicExp',
    'VarExp',
    'LitExp',
    'LamExp',
    'AppExp',
    'var',
    'lit',
    'lam',
    'app'
    ]


################################################################################
## Source expressions
################################################################################

## Atomic Expressions
class AtomicExp(BoundTerm):
    """An expression whose evaluation needs no continuation."""

class VarExp(VarTerm, AtomicExp):
    """A variable."""

class LitExp(LitTerm, AtomicExp):
    """A literal."""

class LamExp(AtomicExp):
    """A single-parameter lambda expression.

    @type scope: Scope
    @param scope: Binds the parameter in the body
    """
    _fields = ('scope',)

    def __init__(self, scope):
        self.scope = scope

    def _toSExp(self, names):
        x = names.push(self.scope.pattern)
        body = self.scope.body._toSExp(names)
        names.pop()
        return lam_sexp([Token(x, 'binder')], body)

## More complex expressions
class AppExp(BoundTerm):
    """A lambda application.

    @type funcExp: Any source expression
    @param funcExp: The function being applied
    @type argExp: Any source expression
    @param argExp: The argument
    """
    _fields = ('funcExp', 'argExp')

    def __init__(self, funcExp, argExp):
        self.funcExp = funcExp
        self.argExp = argExp

    def _toSExp(self, names):
        return call_sexp(self.funcExp._toSExp(names), self.argExp._toSExp(names))


################################################################################
## Constructors
################################################################################

def var(fv):
    return VarExp(fv)

def lit(val):
    return LitExp(val if isinstance(val, Literal) else Literal(val))

def lam(fv, body):
    """Build C{(lambda (fv) body)}, binding the free variable C{fv}."""
    return LamExp(Scope(Binder(fv), body))

def app(funcExp, argExp):
    return AppExp(funcExp, argExp)
