from lamcps.binding import (
    BoundTerm,
    VarTerm,
    LitTerm,
    Binder,
    Scope
    )
from lamcps.flat_expr import (
    FVar,
    FLit,
    FLamOne,
    FLamTwo,
    FCallOne,
    FCallTwo
    )
from lamcps.typs import (
    Token,
    lam_sexp,
    call_sexp
    )

__all__ = [
    'UExp',
    'UVar',
    'ULit',
    'ULam',
    'KExp',
    'KVar',
    'KLit',
    'KLam',
    'CallExp',
    'UCall',
    'KCall',
    'ulam',
    'klam',
    'lower'
    ]


def check(exp, sort):
    if not isinstance(exp, sort):
        raise TypeError(exp)
    return exp


################################################################################
## User expressions
################################################################################

class UExp(BoundTerm):
    """A value: a variable, a literal or a user function."""

class UVar(VarTerm, UExp):
    def lower(self):
        return FVar(self.var)

class ULit(LitTerm, UExp):
    def lower(self):
        return FLit(self.lit)

class ULam(UExp):
    """A user function, taking a value and a continuation.

    @type scope: Scope
    @param scope: Binds the value parameter in a scope binding the
        continuation parameter in a CallExp
    """
    _fields = ('scope',)

    def __init__(self, scope):
        self.scope = scope

    def lower(self):
        inner = self.scope.body
        return FLamTwo(Scope.unsafe(self.scope.pattern,
                                    Scope.unsafe(inner.pattern, inner.body.lower())))

    def _toSExp(self, names):
        inner = self.scope.body
        x = names.push(self.scope.pattern)
        k = names.push(inner.pattern)
        body = inner.body._toSExp(names)
        names.pop()
        names.pop()
        return lam_sexp([Token(x, 'binder'), Token(k, 'cont')], body)


################################################################################
## Continuation expressions
################################################################################

class KExp(BoundTerm):
    """A continuation: a variable, a literal or a continuation lambda."""

class KVar(VarTerm, KExp):
    def replace(self, term):
        # a value substituted in continuation position
        if isinstance(term, UVar):
            return KVar(term.var)
        elif isinstance(term, ULit):
            return KLit(term.lit)
        return check(term, KExp)

    def lower(self):
        return FVar(self.var)

class KLit(LitTerm, KExp):
    def lower(self):
        return FLit(self.lit)

class KLam(KExp):
    """A continuation lambda, taking only a value.

    @type scope: Scope
    @param scope: Binds the value parameter in a CallExp
    """
    _fields = ('scope',)

    def __init__(self, scope):
        self.scope = scope

    def lower(self):
        return FLamOne(Scope.unsafe(self.scope.pattern, self.scope.body.lower()))

    def _toSExp(self, names):
        x = names.push(self.scope.pattern)
        body = self.scope.body._toSExp(names)
        names.pop()
        return lam_sexp([Token(x, 'binder')], body)


################################################################################
## Calls
################################################################################

class CallExp(BoundTerm):
    """A tail call."""

class UCall(CallExp):
    """C{(f v k)}: apply a user function to a value and a continuation.

    @type funcExp: UExp
    @type argExp: UExp
    @type contExp: KExp
    """
    _fields = ('funcExp', 'argExp', 'contExp')

    def __init__(self, funcExp, argExp, contExp):
        self.funcExp = check(funcExp, UExp)
        self.argExp = check(argExp, UExp)
        self.contExp = check(contExp, KExp)

    def lower(self):
        return FCallTwo(self.funcExp.lower(), self.argExp.lower(), self.contExp.lower())

    def _toSExp(self, names):
        return call_sexp(
            self.funcExp._toSExp(names),
            self.argExp._toSExp(names),
            self.contExp._toSExp(names)
            )

class KCall(CallExp):
    """C{(k v)}: apply a continuation to a value.

    @type funcExp: KExp
    @type argExp: UExp
    """
    _fields = ('funcExp', 'argExp')

    def __init__(self, funcExp, argExp):
        self.funcExp = check(funcExp, KExp)
        self.argExp = check(argExp, UExp)

    def lower(self):
        return FCallOne(self.funcExp.lower(), self.argExp.lower())

    def _toSExp(self, names):
        return call_sexp(self.funcExp._toSExp(names), self.argExp._toSExp(names))


################################################################################
## Constructors
################################################################################

def ulam(x, k, body):
    """Build C{(lambda (x k) body)}.

    @type x: FreeVar
    @type k: FreeVar
    @type body: CallExp
    """
    return ULam(Scope(Binder(x), Scope(Binder(k), check(body, CallExp))))

def klam(x, body):
    """Build C{(lambda (x) body)}.

    @type x: FreeVar
    @type body: CallExp
    """
    return KLam(Scope(Binder(x), check(body, CallExp)))

def lower(exp):
    """Collapse a CPS term into a flat expression.

    Purely structural: the scopes are carried over as they are, so no names
    are introduced and alpha-equivalence is preserved.

    @type exp: UExp, KExp or CallExp
    """
    if isinstance(exp, (UExp, KExp, CallExp)):
        return exp.lower()
    else:
        raise TypeError(exp)
