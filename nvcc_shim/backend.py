"""
Compiler and linker front-ends that stand in for gcc.

Both take a gcc-style argument list, split it with
:func:`nvcc_shim.cmdline.classify` and hand nvcc-digestible arguments to
``nvcc``. Flags nvcc does not understand are forwarded to the host compiler
(``-Xcompiler=``) or host linker (``-Xlinker=``) in their original order.

nvcc picks the source language from the file name, so the compiler
front-end gives every source a ``.cu`` sibling for the duration of the
nvcc run and removes it afterwards, whether nvcc succeeded or not.
"""
import subprocess
import sys

from . import display
from . import storage
from .cmdline import classify, merge, report
from .config import Config
from .errors import NoArgumentsError, NoSourceFilesError, ToolInvocationError, ToolNotFoundError

LANGUAGE_FLAG = '--x=cu'


def passthrough(option, flags):
    # -Xcompiler=-Wall,-std=c99
    return f"{option}={','.join(flags)}"


def prepare(argv, config):
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if len(argv) == 0:
        raise NoArgumentsError()

    if '-v' in argv:
        config.enable_verbose()

    args = merge(classify(argv), classify(config.extra_flags))
    report(args, config)
    (native, foreign, sources) = args

    if len(sources) == 0:
        raise NoSourceFilesError()

    return (native, foreign, sources)


def compiler(argv=None, config=None):
    if config is None:
        config = Config.from_env()

    (native, foreign, sources) = prepare(argv, config)

    if foreign:
        native.insert(0, passthrough('-Xcompiler', foreign))

    to_remove = []
    try:
        cu_sources = []
        for src in sources:
            if storage.has_cu_ext(src):
                cu_sources.append(src)
            else:
                cu_src = storage.coerce(src)
                to_remove.append(cu_src)
                cu_sources.append(cu_src)

        run_nvcc([LANGUAGE_FLAG] + native + cu_sources, config)
    finally:
        storage.remove(to_remove, config)


def linker(argv=None, config=None):
    if config is None:
        config = Config.from_env()

    (native, foreign, sources) = prepare(argv, config)

    if foreign:
        native.insert(0, passthrough('-Xlinker', foreign))

    run_nvcc(native + sources, config)


def run_nvcc(args, config=None):
    if config is None:
        config = Config.from_env()

    args = list(args)
    if config.verbose:
        display.info(f"Running {config.nvcc} with args", display.bracketed(args))

    try:
        returncode = subprocess.call([config.nvcc] + args)
    except OSError:
        # not spawnable: let the probe below tell why
        returncode = None

    if returncode != 0:
        # only probe on failure: the success path spawns a single process
        if not nvcc_available(config.nvcc):
            raise ToolNotFoundError(config.nvcc)
        raise ToolInvocationError(config.nvcc, returncode)


def nvcc_available(nvcc='nvcc'):
    try:
        result = subprocess.run([nvcc, '-V'], capture_output=True, text=True)
    except OSError:
        return False
    return len(result.stdout.strip()) > 0
