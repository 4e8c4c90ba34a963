from threading import Lock

from lamcps.sexp import pretty
from lamcps.typs import Names

__all__ = [
    'FreeVar',
    'BoundVar',
    'Binder',
    'Scope',
    'BoundTerm',
    'VarTerm',
    'LitTerm',
    'GenSym',
    'fresh',
    'bind',
    'unbind'
    ]


################################################################################
## Variables
################################################################################

class FreeVar:
    """A free variable.

    Two free variables are the same variable only if they were produced by
    the same call to L{fresh}; the hint is for display only.

    @type uid: Integer
    @param uid: The generation-unique identity
    @type hint: String
    @param hint: A human-readable name
    """
    def __init__(self, uid, hint):
        self.uid = uid
        self.hint = hint

    def display(self, names):
        return names.free.get(self, self.hint)

    def __repr__(self):
        return '{0}${1}'.format(self.hint, self.uid)

    def __hash__(self):
        return hash(self.uid)

    def __eq__(self, other):
        return isinstance(other, FreeVar) and self.uid == other.uid

class BoundVar:
    """A variable bound by an enclosing scope.

    @type scope: Integer
    @param scope: How many scopes to skip outwards, 0 is the innermost
    @type hint: String
    @param hint: The hint of the binder, kept for display
    """
    def __init__(self, scope, hint):
        self.scope = scope
        self.hint = hint

    def display(self, names):
        return names.lookup(self.scope, repr(self))

    def __repr__(self):
        return '{0}@{1}'.format(self.hint, self.scope)

    def __hash__(self):
        return hash(self.scope)

    def __eq__(self, other):
        return isinstance(other, BoundVar) and self.scope == other.scope

class GenSym:
    n = 1
    lock = Lock()

    def __call__(self, hint='_'):
        with GenSym.lock:
            n = GenSym.n
            GenSym.n += 1
        return FreeVar(n, hint)
fresh = GenSym()

def closer(fv):
    """Walk callback turning occurrences of C{fv} into bound variables."""
    def close_var(node, depth):
        if node.var == fv:
            return type(node)(BoundVar(depth, fv.hint))
        return node
    return close_var

def opener(fv):
    """Walk callback turning the outermost bound variable into C{fv}."""
    def open_var(node, depth):
        var = node.var
        if isinstance(var, BoundVar) and var.scope == depth:
            return type(node)(fv)
        return node
    return open_var


################################################################################
## Terms
################################################################################

class BoundTerm:
    """Base class of every term that may mention variables.

    Subclasses list their children in C{_fields}; children that are
    L{BoundTerm}s or L{Scope}s take part in variable traversal, anything
    else (e.g. literals) is carried along untouched. Equality is
    alpha-equivalence.
    """
    _fields = ()

    def children(self):
        return [getattr(self, name) for name in self._fields]

    def walk(self, f, depth):
        """Rebuild the term, replacing each variable node C{v} by
        C{f(v, depth)} where C{depth} counts the scopes entered so far.
        """
        return type(self)(*[
            c.walk(f, depth) if isinstance(c, (BoundTerm, Scope)) else c
            for c in self.children()
            ])

    def map(self, f):
        """Rewrite bottom-up. Scopes are unbound on the way down, so C{f}
        only ever sees locally closed terms.
        """
        return f(type(self)(*[
            c.map(f) if isinstance(c, (BoundTerm, Scope)) else c
            for c in self.children()
            ]))

    def size(self):
        return 1 + sum(c.size() for c in self.children()
                       if isinstance(c, (BoundTerm, Scope)))

    def close_(self, fv):
        return self.walk(closer(fv), 0)

    def open_(self, fv):
        return self.walk(opener(fv), 0)

    def subst(self, fv, term):
        """Capture-avoiding substitution of C{term} for C{fv}.

        C{term} must be locally closed, which every term built through
        L{Scope} is.
        """
        return self.walk(lambda node, depth: node.replace(term) if node.var == fv else node, 0)

    def free_vars(self):
        fvs = set()
        def collect(node, depth):
            if isinstance(node.var, FreeVar):
                fvs.add(node.var)
            return node
        self.walk(collect, 0)
        return fvs

    def occurrences(self, fv):
        count = [0]
        def collect(node, depth):
            if node.var == fv:
                count[0] += 1
            return node
        self.walk(collect, 0)
        return count[0]

    def toSExp(self, names=None):
        if names is None:
            names = Names(self.free_vars())
        return self._toSExp(names)

    def _toSExp(self, names):
        raise NotImplementedError(type(self).__name__)

    def __repr__(self):
        return pretty(self.toSExp())

    def __eq__(self, other):
        return type(self) is type(other) and self.children() == other.children()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self.children()))

class VarTerm(BoundTerm):
    """A term consisting of a single variable occurrence.

    @type var: FreeVar or BoundVar
    @param var: The variable
    """
    _fields = ('var',)

    def __init__(self, var):
        self.var = var

    def walk(self, f, depth):
        return f(self, depth)

    def map(self, f):
        return f(self)

    def replace(self, term):
        """The node that stands for C{term} in this variable's position."""
        return term

    def _toSExp(self, names):
        return names.token(self.var)

class LitTerm(BoundTerm):
    """A term holding a literal, which binds nothing.

    @type lit: Literal
    @param lit: The value
    """
    _fields = ('lit',)

    def __init__(self, lit):
        self.lit = lit

    def _toSExp(self, names):
        return self.lit.toSExp()


################################################################################
## Scopes
################################################################################

class Binder:
    """A pattern binding exactly one variable.

    @type fv: FreeVar
    @param fv: The variable being bound
    """
    def __init__(self, fv):
        if not isinstance(fv, FreeVar):
            raise TypeError(fv)
        self.fv = fv

    @property
    def hint(self):
        return self.fv.hint

    def __repr__(self):
        return repr(self.fv)

    def __hash__(self):
        return hash(self.fv)

    def __eq__(self, other):
        return isinstance(other, Binder) and self.fv == other.fv

class Scope:
    """A binder together with the body it scopes over.

    Building a scope closes the free occurrences of the binder's variable
    in C{body}; L{unbind} reopens them with a fresh variable.

    @type pattern: Binder
    @param pattern: The binder
    @type body: BoundTerm or Scope
    @param body: The body
    """
    def __init__(self, pattern, body):
        if not isinstance(pattern, Binder):
            raise TypeError(pattern)
        self.pattern = pattern
        self.body = body.close_(pattern.fv)

    @classmethod
    def unsafe(cls, pattern, body):
        """Build a scope from a body that is already closed over C{pattern}."""
        scope = cls.__new__(cls)
        scope.pattern = pattern
        scope.body = body
        return scope

    def unbind(self):
        fv = fresh(self.pattern.hint)
        return Binder(fv), self.body.open_(fv)

    def walk(self, f, depth):
        return Scope.unsafe(self.pattern, self.body.walk(f, depth + 1))

    def close_(self, fv):
        return self.walk(closer(fv), 0)

    def open_(self, fv):
        return self.walk(opener(fv), 0)

    def map(self, f):
        pattern, body = self.unbind()
        return Scope(pattern, body.map(f))

    def size(self):
        return self.body.size()

    def __repr__(self):
        return 'Scope({0!r}, {1!r})'.format(self.pattern, self.body)

    def __hash__(self):
        return hash(self.body)

    def __eq__(self, other):
        # binders carry no information up to alpha-equivalence
        return isinstance(other, Scope) and self.body == other.body

    def __ne__(self, other):
        return not self == other

def bind(pattern, body):
    return Scope(pattern, body)

def unbind(scope):
    return scope.unbind()
