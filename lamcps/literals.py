from lamcps.typs import Token

__all__ = [
    'Literal',
    'true',
    'false',
    'void'
    ]


class Literal:
    """An opaque constant.

    Literals are equal by value and carry no binders. Numbers, booleans,
    strings and None (void) are printed the Scheme way.

    @type val: Number, Bool, String or None
    @param val: The value
    """
    def __init__(self, val):
        self.val = val

    def toSExp(self):
        return Token(repr(self))

    def __repr__(self):
        if self.val is None:
            return '(void)'
        elif isinstance(self.val, bool):
            return '#t' if self.val else '#f'
        elif isinstance(self.val, str):
            return '"{0}"'.format(self.val.replace('\\', '\\\\').replace('"', '\\"'))
        else:
            return str(self.val)

    def __hash__(self):
        return hash((type(self.val), self.val))

    def __eq__(self, other):
        # 1 and True are different literals
        return (isinstance(other, Literal) and
                type(self.val) is type(other.val) and
                self.val == other.val)

    def __ne__(self, other):
        return not self == other

# these may be useful synonyms
true = Literal(True)
false = Literal(False)
void = Literal(None)
