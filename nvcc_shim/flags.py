"""
nvcc flag grammar.

Each rule pairs a matcher (a predicate over one command-line token) with
the disposition of the tokens it matches. Rules are tried in order and the
first match wins, so whether a flag takes a value is always a static
property of the flag, never guessed from the tokens around it.
"""
from enum import Enum


class Disposition(Enum):
    STANDALONE = 'standalone'             # -c, --shared
    INLINE_VALUE = 'inline-value'         # -O3, -arch=sm_70, --optimize=3
    FOLLOWING_VALUE = 'following-value'   # -o out.o, --optimize 3
    FOREIGN = 'foreign'                   # forwarded to the host compiler
    POSITIONAL = 'positional'             # source file


def exact(*names):
    names = frozenset(names)
    def match(token):
        return token in names
    match.__doc__ = "one of: " + ", ".join(sorted(names))
    return match


def joined(prefix, letters):
    # single letter with its value attached: -lm, -O3, -DFOO=1
    letters = frozenset(letters)
    def match(token):
        return (len(token) > len(prefix) + 1
                and token.startswith(prefix)
                and token[len(prefix)] in letters)
    match.__doc__ = "%s[%s]<value>" % (prefix, "".join(sorted(letters)))
    return match


def assigned(prefix, names):
    # long option with an explicit, non-empty value: -arch=sm_70
    names = frozenset(names)
    def match(token):
        if not token.startswith(prefix) or '=' not in token:
            return False
        name, value = token[len(prefix):].split('=', 1)
        return name in names and len(value) > 0
    match.__doc__ = "%s<name>=<value>" % prefix
    return match


def dashed(token):
    return token.startswith('-')


def anything(token):
    return True


# flags without a value
SHORT_SWITCHES = ('E', 'M', 'c', 'g', 'v', 'cuda', 'cubin', 'fatbin', 'ptx',
                  'gpu', 'lib', 'pg', 'extdeb', 'shared', 'noprof', 'foreign',
                  'dryrun', 'keep', 'clean', 'deviceemu', 'use_fast_math')

LONG_SWITCHES = ('cuda', 'cubin', 'fatbin', 'ptx', 'gpu', 'preprocess',
                 'generate-dependencies', 'lib', 'profile', 'debug',
                 'extern-debug-info', 'shared', 'dont-use-profile', 'foreign',
                 'dryrun', 'verbose', 'keep', 'clean-targets', 'no-align-double',
                 'device-emulation', 'use_fast_math')

# single letters accepting an attached value (-lm)
JOINED_LETTERS = 'lLDUIoOmG'

# single letters accepting the value as the next token (-o out.o);
# note that a bare -O is not one of them
SEPARATE_LETTERS = 'oDUlLImG'

# options taking a value, either as -name=value or as -name value
SHORT_OPTIONS = ('include', 'isystem', 'odir', 'ccbin',
                 'Xcompiler', 'Xlinker', 'Xopencc', 'Xcudafe', 'Xptxas', 'Xfatbin',
                 'idp', 'ddp', 'dp', 'arch', 'code', 'gencode', 'dir', 'ext', 'int',
                 'maxrregcount', 'ftz', 'prec-div', 'prec-sqrt')

LONG_OPTIONS = ('output-file', 'pre-include', 'library', 'define-macro',
                'undefine-macro', 'include-path', 'system-include', 'library-path',
                'output-directory', 'compiler-bindir', 'device-debug', 'optimize',
                'machine', 'compiler-options', 'linker-options', 'opencc-options',
                'cudafe-options', 'ptxas-options', 'fatbin-options',
                'input-drive-prefix', 'dependency-drive-prefix', 'gpu-name',
                'gpu-code', 'generate-code', 'export-dir', 'extern-mode',
                'intern-mode', 'maxrregcount', 'ftz', 'prec-div', 'prec-sqrt',
                'host-compilation', 'options-file')


def _with_prefix(prefix, names):
    return tuple(prefix + n for n in names)


RULES = (
    (exact(*_with_prefix('-', SHORT_SWITCHES)), Disposition.STANDALONE),
    (exact(*_with_prefix('--', LONG_SWITCHES)), Disposition.STANDALONE),
    # bare -odir and -maxrregcount would otherwise read as -o dir and -m axrregcount
    (exact(*_with_prefix('-', SHORT_OPTIONS)), Disposition.FOLLOWING_VALUE),
    (joined('-', JOINED_LETTERS), Disposition.INLINE_VALUE),
    (assigned('-', SHORT_OPTIONS), Disposition.INLINE_VALUE),
    (assigned('--', LONG_OPTIONS), Disposition.INLINE_VALUE),
    (exact(*_with_prefix('-', SEPARATE_LETTERS)), Disposition.FOLLOWING_VALUE),
    (exact(*_with_prefix('--', LONG_OPTIONS)), Disposition.FOLLOWING_VALUE),
    (dashed, Disposition.FOREIGN),
    (anything, Disposition.POSITIONAL),
)


def disposition(token, rules=RULES):
    for (match, disp) in rules:
        if match(token):
            return disp
    # unreachable with RULES: the last rule accepts anything
    raise RuntimeError(f"no rule matches token '{token}'!")
