from lamcps.binding import fresh, bind, unbind, Binder, Scope, FreeVar
from lamcps.cont_expr import lower
from lamcps.cps import cps, halt
from lamcps.opt import optimize
from lamcps.sexp import pretty, pretty_print
