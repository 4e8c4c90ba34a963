import logging

from lamcps.cont_expr import (
    UVar,
    ULit,
    KVar,
    KLam,
    KCall
    )

__all__ = [
    'inline',
    'eta_reduce',
    'optimize'
    ]

logger = logging.getLogger(__name__)


def in_k_position(exp, fv):
    """Whether C{fv} is used as a continuation somewhere in C{exp}."""
    found = [False]
    def visit(node, depth):
        if isinstance(node, KVar) and node.var == fv:
            found[0] = True
        return node
    exp.walk(visit, 0)
    return found[0]

def inline(exp):
    # basic idea: KCall(KLam(x. body), v) -> body[x := v]
    # a user lambda is only moved, never copied
    if (isinstance(exp, KCall) and
        isinstance(exp.funcExp, KLam)):
        x, body = exp.funcExp.scope.unbind()
        v = exp.argExp
        if (isinstance(v, (UVar, ULit)) or
            body.occurrences(x.fv) <= 1 and not in_k_position(body, x.fv)):
            return body.subst(x.fv, v)
    return exp

def eta_reduce(exp):
    # (lambda (x) (k x)) -> k
    if isinstance(exp, KLam):
        x, body = exp.scope.unbind()
        if (isinstance(body, KCall) and
            isinstance(body.argExp, UVar) and
            body.argExp.var == x.fv and
            x.fv not in body.funcExp.free_vars()):
            return body.funcExp
    return exp

def optimize(exp, opts=(inline,)):
    """Apply administrative reductions bottom-up, one pass per entry of
    C{opts}.

    @type exp: A CPS term
    @type opts: A sequence of functions from a CPS term to a CPS term
    """
    for opt in opts:
        count = [0]
        def counted(e, opt=opt):
            res = opt(e)
            if res is not e:
                count[0] += 1
            return res
        exp = exp.map(counted)
        logger.debug('optimize: %s performed %d reductions', opt.__name__, count[0])
    return exp
