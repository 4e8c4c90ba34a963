import logging

from lamcps.binding import fresh
from lamcps.expr import (
    AtomicExp,
    VarExp,
    LitExp,
    LamExp,
    AppExp
    )
from lamcps.cont_expr import (
    UVar,
    ULit,
    KVar,
    KCall,
    UCall,
    ulam,
    klam
    )

__all__ = ['cps', 'T_k', 'T_c', 'M', 'halt', 'halt_var']

logger = logging.getLogger(__name__)


halt_var = fresh('halt')
halt = KVar(halt_var)


################################################################################
## Conversion to CPS
################################################################################

def cps(exp, k=halt):
    """Transform a program into CPS.

    The result, when evaluated, applies C{k} to the value of C{exp}.

    @type exp: A source expression
    @type k: KExp
    @param k: The final continuation
    """
    debug = logger.isEnabledFor(logging.DEBUG)
    if debug:
        logger.debug('cps: converting a source term of %d nodes', exp.size())
    call = T_k(exp, k)
    if debug:
        logger.debug('cps: produced a call of %d nodes', call.size())
    return call

def T_k(exp, k):
    """Transform an expression into CPS with a reified continuation.

    @type exp: A source expression
    @param exp: The expression to transform
    @type k: KExp
    @param k: The continuation to apply
    """
    if isinstance(exp, AtomicExp):
        return KCall(k, M(exp))
    elif isinstance(exp, AppExp):
        _rv = fresh('rv')
        cont = klam(_rv, KCall(k, UVar(_rv)))
        return T_app(exp, cont)
    else:
        raise TypeError(exp)

def T_c(exp, c):
    """Transform an expression into CPS under a continuation variable.

    @type exp: A source expression
    @param exp: The expression to transform
    @type c: FreeVar
    @param c: The continuation parameter of the enclosing user function
    """
    if isinstance(exp, AtomicExp):
        return KCall(KVar(c), M(exp))
    elif isinstance(exp, AppExp):
        return T_app(exp, KVar(c))
    else:
        raise TypeError(exp)

def T_app(exp, cont):
    """Evaluate the function, then the argument, then call the function
    with C{cont}.

    @type exp: AppExp
    @type cont: KExp
    """
    _f = fresh('f')
    _e = fresh('e')
    return T_k(exp.funcExp,
               klam(_f, T_k(exp.argExp,
                            klam(_e, UCall(UVar(_f), UVar(_e), cont)))))

def M(exp):
    """Transform an AtomicExp into CPS.

    @type exp: AtomicExp
    """
    if isinstance(exp, LamExp):
        x, body = exp.scope.unbind()
        _k = fresh('k')
        return ulam(x.fv, _k, T_c(body, _k))
    elif isinstance(exp, VarExp):
        return UVar(exp.var)
    elif isinstance(exp, LitExp):
        return ULit(exp.lit)
    elif isinstance(exp, AppExp):
        raise AssertionError('M called on an application: {0!r}'.format(exp))
    else:
        raise TypeError(exp)
