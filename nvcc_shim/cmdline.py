import shlex
from collections import namedtuple

from tabulate import tabulate

from . import display
from .errors import DanglingValueError
from .flags import Disposition, disposition

ClassifiedArguments = namedtuple('ClassifiedArguments', ['native', 'foreign', 'sources'])


def tokenize(cmd):
    # cmd can be a string (split like a shell would) or a list of tokens
    if isinstance(cmd, str):
        return shlex.split(cmd)
    return list(cmd)


def dispositions(tokens):
    # yields (token, disposition); a token consumed as the value of the
    # previous flag is reported with disposition None
    expecting_value = False
    for token in tokens:
        if expecting_value:
            expecting_value = False
            yield (token, None)
            continue

        disp = disposition(token)
        if disp == Disposition.FOLLOWING_VALUE:
            expecting_value = True
        yield (token, disp)

    if expecting_value:
        raise DanglingValueError(token)


def classify(cmd, config=None):
    tokens = tokenize(cmd)

    native = []
    foreign = []
    sources = []

    for (token, disp) in dispositions(tokens):
        if disp is None or disp in (Disposition.STANDALONE,
                                    Disposition.INLINE_VALUE,
                                    Disposition.FOLLOWING_VALUE):
            native.append(token)
        elif disp == Disposition.FOREIGN:
            foreign.append(token)
        else:
            sources.append(token)

    args = ClassifiedArguments(native, foreign, sources)
    report(args, config)
    return args


def merge(*classified):
    # each part has been classified on its own, so a trailing flag in one
    # never takes its value from the next
    return ClassifiedArguments([t for c in classified for t in c.native],
                               [t for c in classified for t in c.foreign],
                               [t for c in classified for t in c.sources])


def report(args, config):
    if config is not None and config.verbose:
        display.info("found nvcc args", display.bracketed(args.native))
        display.info("found other args", display.bracketed(args.foreign))
        display.info("found source files", display.bracketed(args.sources))


def explain(cmd):
    rows = []
    previous = None
    for (token, disp) in dispositions(tokenize(cmd)):
        if disp is None:
            rows.append((token, 'nvcc', f"value of {previous}"))
        elif disp == Disposition.FOREIGN:
            rows.append((token, 'foreign', disp.value))
        elif disp == Disposition.POSITIONAL:
            rows.append((token, 'source', disp.value))
        else:
            rows.append((token, 'nvcc', disp.value))
        previous = token
    return rows


def render(rows):
    return tabulate(rows, headers=['argument', 'goes to', 'rule'], tablefmt="fancy_grid")
