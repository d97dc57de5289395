import os
import os.path as osp
import shutil

from . import display
from .errors import CoercionError, CoercionFailure

CU_EXT = '.cu'


def has_cu_ext(path):
    return path.endswith(CU_EXT)


def cu_name(path):
    # x.c => x.cu
    (base, _) = osp.splitext(path)
    return base + CU_EXT


def coerce(path):
    target = cu_name(path)

    # link targets are resolved from the link's own directory, so they
    # get the bare file name; the copy below resolves from the working
    # directory and needs the full path.
    old_name = osp.basename(path)
    cause = None

    for make_link in (os.symlink, os.link):
        try:
            make_link(old_name, target)
            return target
        except OSError as ex:
            cause = ex

    if not osp.isfile(target):
        try:
            shutil.copyfile(path, target)
            return target
        except OSError as ex:
            cause = ex

    if osp.isfile(target):
        raise CoercionError(target, CoercionFailure.ALREADY_EXISTS) from cause
    raise CoercionError(target, CoercionFailure.UNKNOWN) from cause


def remove(paths, config=None):
    paths = list(paths)
    if not paths:
        return

    if config is not None and config.verbose:
        display.info("Removing " + ", ".join(paths))

    for p in paths:
        try:
            os.unlink(p)
        except OSError as ex:
            display.warning(f"cannot remove '{p}': {ex.strerror}")
