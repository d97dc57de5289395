import pytest

from nvcc_shim.__main__ import main, main_compiler, main_linker


@pytest.fixture
def env(fake_nvcc, monkeypatch):
    monkeypatch.setenv('NVCC_SHIM_NVCC', str(fake_nvcc.path))
    monkeypatch.delenv('NVCC_SHIM_FLAGS', raising=False)
    monkeypatch.delenv('NVCC_SHIM_VERBOSE', raising=False)
    return fake_nvcc


class TestMain:
    def test_usage(self, capsys):
        assert main(['nvcc-shim']) == 2
        assert main(['nvcc-shim', 'assemble', 'x.s']) == 2
        assert "Usage: nvcc-shim" in capsys.readouterr().err

    def test_compiler(self, env, srcdir):
        (srcdir / 'x.c').write_text("int x;\n")
        assert main(['nvcc-shim', 'compiler', '--', '-c', 'x.c', '-fPIC']) == 0
        [call] = env.calls
        assert call['args'] == ['--x=cu', '-Xcompiler=-fPIC', '-c', 'x.cu']
        assert not (srcdir / 'x.cu').exists()

    def test_linker(self, env, srcdir):
        assert main(['nvcc-shim', 'linker', 'x.o', '-o', 'x']) == 0
        [call] = env.calls
        assert call['args'] == ['-o', 'x', 'x.o']

    def test_explain(self, capsys):
        assert main(['nvcc-shim', 'explain', '-c', 'x.c', '-Wall']) == 0
        out = capsys.readouterr().out
        assert "x.c" in out
        assert "foreign" in out

    def test_error_message(self, env, capsys):
        assert main(['nvcc-shim', 'compiler']) == 1
        assert "nothing to do" in capsys.readouterr().err
        assert env.calls == []

    def test_dangling_value(self, env, capsys):
        assert main(['nvcc-shim', 'compiler', 'x.c', '-o']) == 1
        assert "[[-o]]" in capsys.readouterr().err

    def test_nvcc_status_is_propagated(self, env, srcdir):
        (srcdir / 'x.c').write_text("int x;\n")
        env.set_status(3)
        assert main(['nvcc-shim', 'compiler', '-c', 'x.c']) == 3
        assert not (srcdir / 'x.cu').exists()

    def test_console_scripts(self, env, srcdir, monkeypatch):
        (srcdir / 'x.c').write_text("int x;\n")
        monkeypatch.setattr('sys.argv', ['nvcc-shim-cc', '-c', 'x.c'])
        assert main_compiler() == 0
        monkeypatch.setattr('sys.argv', ['nvcc-shim-ld', 'x.o', '-shared', '-o', 'x.so'])
        assert main_linker() == 0
        assert [c['args'] for c in env.calls] == [
            ['--x=cu', '-c', 'x.cu'],
            ['-shared', '-o', 'x.so', 'x.o'],
        ]
