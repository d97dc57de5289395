import json
import sys

import pytest

from nvcc_shim.config import Config

FAKE_NVCC = '''#!{python}
import json
import os
import sys

args = sys.argv[1:]
if args == ['-V']:
    print("nvcc: NVIDIA (R) Cuda compiler driver")
    print("Cuda compilation tools, release 12.4, V12.4.131")
    sys.exit(0)

with open({log!r}, 'a') as fp:
    fp.write(json.dumps({{'args': args,
                         'existing': [a for a in args if os.path.exists(a)]}}) + "\\n")

with open({status!r}) as fp:
    sys.exit(int(fp.read()))
'''


class FakeNvcc:
    # stand-in for nvcc: records every call, exits with a configurable status
    def __init__(self, root):
        root.mkdir(parents=True, exist_ok=True)
        self.path = root / 'nvcc'
        self.log = root / 'calls.jsonl'
        self.status_file = root / 'status'
        self.set_status(0)
        self.path.write_text(FAKE_NVCC.format(python=sys.executable,
                                              log=str(self.log),
                                              status=str(self.status_file)))
        self.path.chmod(0o755)

    def set_status(self, status):
        self.status_file.write_text(str(status))

    @property
    def calls(self):
        if not self.log.exists():
            return []
        return [json.loads(line) for line in self.log.read_text().splitlines()]


@pytest.fixture
def fake_nvcc(tmp_path):
    return FakeNvcc(tmp_path / 'bin')


@pytest.fixture
def config(fake_nvcc):
    return Config(nvcc=str(fake_nvcc.path))


@pytest.fixture
def srcdir(tmp_path, monkeypatch):
    d = tmp_path / 'src'
    d.mkdir()
    monkeypatch.chdir(d)
    return d
