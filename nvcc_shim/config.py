import os
import shlex

from . import display

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class Config:
    # verbose: gates diagnostics only
    # nvcc: executable to run (resolved through PATH)
    # extra_flags: gcc-style flags appended to every command line
    def __init__(self, verbose=False, nvcc=None, extra_flags=None):
        self.verbose = verbose
        self.nvcc = nvcc if nvcc is not None else 'nvcc'
        self.extra_flags = list(extra_flags) if extra_flags is not None else []

    @staticmethod
    def from_env(environ=None):
        if environ is None:
            environ = os.environ

        verbose = environ.get('NVCC_SHIM_VERBOSE', '').strip().lower() in TRUE_VALUES
        nvcc = environ.get('NVCC_SHIM_NVCC') or None

        extra_flags = []
        flags = environ.get('NVCC_SHIM_FLAGS')
        if flags is not None:
            extra_flags.extend(shlex.split(flags))

        return Config(verbose=verbose, nvcc=nvcc, extra_flags=extra_flags)

    def enable_verbose(self):
        if self.verbose:
            return
        display.info("verbose output enabled")
        self.verbose = True

    def __repr__(self):
        return "Config(verbose=%s, nvcc=%r, extra_flags=%r)" % (self.verbose, self.nvcc, self.extra_flags)
