from collections import namedtuple

__all__ = [
    'Token',
    'SExp',
    'Names',
    'lam_sexp',
    'call_sexp'
    ]

################################################################################
## Printing types
################################################################################

# An atom of printed output, with the color role it is rendered in
Token = namedtuple('Token', ['val', 'role'], defaults=[None])

class SExp(list):
    """A S-expression.

    @type args: A list of SExps and/or Tokens
    @param args: SExps or Tokens contained within this S-expression
    @type split: Integer or None
    @param split: Number of leading elements kept on the opening line when
        the expression is too wide; the rest goes on its own line. None
        means the elements are never moved to a new line.
    """
    def __init__(self, *args, split=None):
        self.split = split
        super(SExp, self).__init__(args)
    def __getitem__(self, key):
        if isinstance(key, slice):
            return SExp(*super(SExp, self).__getitem__(key), split=self.split)
        else:
            return super(SExp, self).__getitem__(key)
    def __repr__(self):
        return 'SExp(' + ', '.join(repr(e) for e in self) + ')'

class Names:
    """Display names of the variables of the term being printed.

    A variable is shown by its hint unless that name is already visible, in
    which case a counter is appended. Free variables are named first, in
    order of creation; binders are named as they are entered.

    @type free: An iterable of FreeVars
    @param free: The free variables of the term
    """
    def __init__(self, free=()):
        self.used = set()
        self.stack = []
        self.free = {}
        for fv in sorted(free, key=lambda fv: fv.uid):
            self.free[fv] = self.fresh_name(fv.hint)

    def fresh_name(self, hint):
        hint = hint or '_'
        name = hint
        i = 1
        while name in self.used:
            name = hint + str(i)
            i += 1
        self.used.add(name)
        return name

    def push(self, binder):
        name = self.fresh_name(binder.hint)
        self.stack.append(name)
        return name

    def pop(self):
        self.used.discard(self.stack.pop())

    def lookup(self, scope, default):
        # dangling variables show up when printing the body of a bare scope
        if scope < len(self.stack):
            return self.stack[-1 - scope]
        return default

    def token(self, var, role=None):
        return Token(var.display(self), role)

def lam_sexp(params, body):
    return SExp(Token('lambda', 'keyword'), SExp(*params), body, split=2)

def call_sexp(func, *args):
    if isinstance(func, Token) and func.role is None:
        func = func._replace(role='func')
    return SExp(func, *args)
