from .backend import compiler, linker, run_nvcc, nvcc_available
from .cmdline import ClassifiedArguments, classify, explain, render
from .config import Config
from .errors import (CoercionError, CoercionFailure, DanglingValueError, NoArgumentsError,
                     NoSourceFilesError, NvccShimError, ToolInvocationError, ToolNotFoundError)
from .flags import Disposition, RULES
from .storage import coerce, cu_name, remove

__version__ = '0.1.0'
