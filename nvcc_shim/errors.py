from enum import Enum


class NvccShimError(RuntimeError):
    pass


class NoArgumentsError(NvccShimError):
    def __init__(self):
        super().__init__("nothing to do: no arguments given, not even a source file!")


class NoSourceFilesError(NvccShimError):
    def __init__(self):
        super().__init__("at least one source file must be given!")


class DanglingValueError(NvccShimError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"last argument [[{token}]] expects a value, but none was given!")


class CoercionFailure(Enum):
    ALREADY_EXISTS = 'already exists'
    UNKNOWN = 'unknown'


class CoercionError(NvccShimError):
    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        if reason == CoercionFailure.ALREADY_EXISTS:
            why = "because it already exists"
        else:
            why = "for an unknown reason"
        super().__init__(f"unable to create file '{target}' {why}! nvcc needs that name to compile the source as CUDA")


class ToolNotFoundError(NvccShimError):
    def __init__(self, nvcc):
        self.nvcc = nvcc
        super().__init__(f"unable to run '{nvcc}': is it in your PATH?")


class ToolInvocationError(NvccShimError):
    def __init__(self, nvcc, returncode):
        self.nvcc = nvcc
        self.returncode = returncode
        if returncode is None:
            super().__init__(f"'{nvcc}' could not be started!")
        else:
            super().__init__(f"'{nvcc}' encountered a problem (exit status: {returncode})!")
