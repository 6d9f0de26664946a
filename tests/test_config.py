import pytest

from flatcad import config
from flatcad.geom import close
from flatcad.polygon import Polygon


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    monkeypatch.setattr(config, 'DP_TOL', config.DP_TOL)
    monkeypatch.setattr(config, 'SVG_DEFAULTS', dict(config.SVG_DEFAULTS))


def test_default_tolerance():
    assert config.getTolerance() == 1e-6


def test_set_tolerance():
    previous = config.setTolerance(0.01)
    assert previous == 1e-6
    assert config.getTolerance() == 0.01
    assert close(1.0, 1.005)


@pytest.mark.parametrize('bad', [0, -1, 'small', None, True])
def test_bad_tolerance(bad):
    with pytest.raises(ValueError):
        config.setTolerance(bad)
    assert config.getTolerance() == 1e-6


def test_tolerance_context():
    with config.tolerance(0.1) as tol:
        assert tol == 0.1
        assert close(1.0, 1.05)
    assert config.getTolerance() == 1e-6
    assert not close(1.0, 1.05)


def test_tolerance_context_restores_on_error():
    with pytest.raises(RuntimeError):
        with config.tolerance(0.1):
            raise RuntimeError('boom')
    assert config.getTolerance() == 1e-6


def test_svg_attributes():
    attrs = config.svg_attributes(stroke='red', fill=None, id='')
    assert attrs['stroke'] == 'red'
    assert attrs['fill'] == config.SVG_DEFAULTS['fill']
    assert 'id' not in attrs


def test_load_config(tmp_path):
    path = tmp_path / 'flatcad.yaml'
    path.write_text('tolerance: 1.0e-4\nsvg:\n  fill: none\n  stroke: green\n')
    data = config.load_config(path)
    assert data['tolerance'] == pytest.approx(1e-4)
    assert config.getTolerance() == pytest.approx(1e-4)
    svg = Polygon([(0, 0), (1, 0), (1, 1)]).svg()
    assert 'fill="none"' in svg
    assert 'stroke="green"' in svg


def test_load_empty_config(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert config.load_config(str(path)) == {}
    assert config.getTolerance() == 1e-6


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load_config(tmp_path / 'nope.yaml')


@pytest.mark.parametrize('text', [
    '- 1\n- 2\n',
    'tolerance: -1\n',
    'svg: red\n',
    'svg:\n  colour: red\n',
])
def test_bad_config(tmp_path, text):
    path = tmp_path / 'bad.yaml'
    path.write_text(text)
    with pytest.raises(ValueError):
        config.load_config(path)
