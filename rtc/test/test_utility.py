import pytest
import yaml
from rtc import _utility, v4h


@pytest.fixture
def dirs(tmp_path, monkeypatch):
    cwd = tmp_path/'cwd'
    home = tmp_path/'home'
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv('HOME', str(home))
    return cwd, home


def test_load_config_missing(dirs):
    assert _utility.load_config() == {}


def test_load_config_home(dirs):
    cwd, home = dirs
    (home/'rtc.yml').write_text('v4h_backend: numba\n')
    assert _utility.load_config() == {'v4h_backend': 'numba'}


def test_load_config_cwd_first(dirs):
    cwd, home = dirs
    (home/'rtc.yml').write_text('v4h_backend: numba\n')
    (cwd/'rtc.yml').write_text('v4h_backend: numpy\n')
    assert _utility.load_config() == {'v4h_backend': 'numpy'}


def test_load_config_empty(dirs):
    cwd, home = dirs
    (cwd/'rtc.yml').write_text('')
    assert _utility.load_config() == {}


def test_load_config_malformed(dirs):
    cwd, home = dirs
    (cwd/'rtc.yml').write_text('v4h_backend: [numpy\n')
    with pytest.raises(yaml.YAMLError):
        _utility.load_config()


def test_backend_from_config(dirs, monkeypatch):
    cwd, home = dirs
    monkeypatch.setattr(v4h, 'backend', None)
    monkeypatch.setattr(v4h, 'backend_name', None)
    (cwd/'rtc.yml').write_text('v4h_backend: numpy\n')
    assert v4h.get_backend() == 'numpy'


def test_backend_default(dirs, monkeypatch):
    monkeypatch.setattr(v4h, 'backend', None)
    monkeypatch.setattr(v4h, 'backend_name', None)
    assert v4h.get_backend() == v4h.DEFAULT_BACKEND


def test_backend_invalid_config(dirs, monkeypatch):
    cwd, home = dirs
    monkeypatch.setattr(v4h, 'backend', None)
    monkeypatch.setattr(v4h, 'backend_name', None)
    (cwd/'rtc.yml').write_text('v4h_backend: opencl\n')
    with pytest.raises(ValueError):
        v4h.get_backend()
