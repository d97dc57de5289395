import os
import sys

from . import backend
from . import display
from .cmdline import explain, render
from .errors import NvccShimError, ToolInvocationError

MODES = {
    'compiler': backend.compiler,
    'linker': backend.linker,
}


def usage(prog):
    print(f"Usage: {prog} {{compiler|linker|explain}} [--] <gcc-style arguments>", file=sys.stderr)
    return 2


def run(mode, args):
    if mode == 'explain':
        print(render(explain(args)))
    else:
        MODES[mode](args)


def guarded(mode, args):
    try:
        run(mode, args)
    except ToolInvocationError as ex:
        display.error(str(ex))
        return ex.returncode if ex.returncode is not None and ex.returncode > 0 else 1
    except NvccShimError as ex:
        display.error(str(ex))
        return 1
    return 0


def strip_separator(args):
    # python -m nvcc_shim compiler -- source.c -o prog
    if args and args[0] == '--':
        return args[1:]
    return args


def main(argv=None):
    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else 'nvcc-shim'
    if prog == '__main__.py':
        prog = 'python -m nvcc_shim'

    if len(argv) < 2 or argv[1] not in ('compiler', 'linker', 'explain'):
        return usage(prog)

    return guarded(argv[1], strip_separator(argv[2:]))


def main_compiler():
    return guarded('compiler', strip_separator(sys.argv[1:]))


def main_linker():
    return guarded('linker', strip_separator(sys.argv[1:]))


if __name__ == '__main__':
    sys.exit(main())
