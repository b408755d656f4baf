""" Shared helpers for the pyapplicative tests """


def add(a, b):
    return a + b


class Spy:
    """Records every call and returns its argument unchanged."""
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return args[0] if len(args) == 1 else args
