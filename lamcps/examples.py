import logging
import sys

from lamcps.binding import fresh
from lamcps.cps import cps
from lamcps.expr import var, lit, lam, app
from lamcps.opt import optimize
from lamcps.sexp import pretty_print

def examples():
    x, f, a, b = fresh('x'), fresh('f'), fresh('a'), fresh('b')
    return [
        ('identity', lam(x, var(x))),
        ('application', app(var(f), var(a))),
        ('nested application', app(app(var(f), var(a)), var(b))),
        ('lambda applied', app(lam(x, var(x)), var(a))),
        ('higher-order', lam(f, app(var(f), var(f)))),
        ('literal', lit(42)),
        ('church two', lam(f, lam(x, app(var(f), app(var(f), var(x))))))
        ]

def main():
    logging.basicConfig(level=logging.INFO)
    out = sys.stdout
    for name, e in examples():
        e_cps = cps(e)
        for label, term in [('source', e), ('cps', e_cps), ('reduced', optimize(e_cps))]:
            out.write('; {0}: {1}\n'.format(name, label))
            pretty_print(term, out)
            out.write('\n')
        out.write('\n')
    return 0

if __name__ == '__main__':
    sys.exit(main())
