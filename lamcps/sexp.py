from colorama import Fore, Style, just_fix_windows_console

from lamcps.typs import (
    SExp,
    Token
    )

__all__ = [
    'DEFAULT_WIDTH',
    'COLORS',
    'pretty',
    'pretty_print'
    ]

NEWLINE = '\n'
SPACE = ' '
LPAR = '('
RPAR = ')'
INDENT = 2

DEFAULT_WIDTH = 70

# color role -> terminal style
COLORS = {
    'keyword': Fore.MAGENTA,
    'binder': Fore.GREEN,
    'cont': Fore.RED,
    'func': Fore.BLUE
    }

def pretty(expr, width=DEFAULT_WIDTH, color=False):
    """Lay out a S-expression.

    Anything that fits in the rest of the line is printed flat. A list that
    does not fit and has a split point (a lambda) continues on a new line,
    indented, after its split point; other lists keep their elements on the
    current line and let them break on their own.

    @type expr: SExp or Token
    @type width: Integer
    @param width: The target line width
    @type color: Bool
    @param color: Whether to emit terminal color codes
    """
    def paint(tok):
        if color and tok.role in COLORS:
            return COLORS[tok.role] + tok.val + Style.RESET_ALL
        return tok.val
    # printed width when flat, not counting color codes
    def size(expr):
        if isinstance(expr, Token):
            return len(expr.val)
        return sum(size(e) for e in expr) + max(len(expr) - 1, 0) + 2
    def flat_(expr):
        if isinstance(expr, Token):
            return paint(expr)
        return LPAR + SPACE.join(flat_(e) for e in expr) + RPAR
    def pretty_(expr, col):
        if isinstance(expr, Token):
            return paint(expr), col + len(expr.val)
        elif isinstance(expr, SExp):
            n = size(expr)
            if col + n <= width:
                return flat_(expr), col + n
            indent = col + INDENT
            res = LPAR
            col += 1
            for i, e in enumerate(expr):
                if i == 0:
                    pass
                elif i == expr.split:
                    res += NEWLINE + SPACE * indent
                    col = indent
                else:
                    res += SPACE
                    col += 1
                text, col = pretty_(e, col)
                res += text
            return res + RPAR, col + 1
        else:
            raise ValueError('invalid SExp: ' + str(expr))
    return pretty_(expr, 0)[0]

def pretty_print(node, out, width=DEFAULT_WIDTH, color=None):
    """Render a term to a text stream.

    Errors raised by C{out} propagate to the caller.

    @type node: A term with a toSExp method
    @type out: A writable text stream
    @type color: Bool or None
    @param color: None colors the output only when C{out} is a terminal
    """
    if color is None:
        isatty = getattr(out, 'isatty', None)
        color = bool(isatty and isatty())
    if color:
        # no-op except on legacy Windows consoles
        just_fix_windows_console()
    out.write(pretty(node.toSExp(), width, color))
