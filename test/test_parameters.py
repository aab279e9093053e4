import pytest

from obbkit.data.parameters import CollisionParameters, ParameterError, env_flag


def test_defaults(monkeypatch):
    monkeypatch.delenv("OBBKIT_CROSS_AXES", raising=False)
    monkeypatch.delenv("OBBKIT_CONVERGENCE_TOLERANCE", raising=False)
    monkeypatch.delenv("OBBKIT_MAX_ITERATIONS", raising=False)
    params = CollisionParameters()
    assert params.cross_axes is False
    assert params.clearance == 0.0
    assert params.convergence_tolerance == pytest.approx(1e-4)
    assert params.max_iterations == 100


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OBBKIT_CROSS_AXES", "yes")
    monkeypatch.setenv("OBBKIT_CONVERGENCE_TOLERANCE", "1e-6")
    monkeypatch.setenv("OBBKIT_MAX_ITERATIONS", "25")
    params = CollisionParameters()
    assert params.cross_axes is True
    assert params.convergence_tolerance == pytest.approx(1e-6)
    assert params.max_iterations == 25


def test_keyword_beats_environment(monkeypatch):
    monkeypatch.setenv("OBBKIT_CROSS_AXES", "1")
    params = CollisionParameters(cross_axes=False)
    assert params.cross_axes is False


def test_bad_environment_value(monkeypatch):
    monkeypatch.setenv("OBBKIT_MAX_ITERATIONS", "many")
    with pytest.raises(ParameterError, match="OBBKIT_MAX_ITERATIONS"):
        CollisionParameters()


@pytest.mark.parametrize("value, expected", [
    ("1", True), ("true", True), (" On ", True), ("0", False), ("off", False), ("", False),
])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("OBBKIT_TEST_FLAG", value)
    assert env_flag("OBBKIT_TEST_FLAG") is expected


def test_set_and_get():
    params = CollisionParameters(cross_axes=False)
    params.set('cross_axes', True)
    params.set('clearance', 0.25)
    params.set('max_iterations', 10)
    assert params.get('cross_axes') is True
    assert params.get('clearance') == pytest.approx(0.25)
    assert params.get('max_iterations') == 10


@pytest.mark.parametrize("name, value", [
    ('clearance', -1.0),
    ('clearance', float('nan')),
    ('convergence_tolerance', 0.0),
    ('max_iterations', 0),
    ('max_iterations', 2.5),
    ('unknown', 1.0),
])
def test_invalid_values(name, value):
    params = CollisionParameters()
    with pytest.raises(ParameterError):
        params.set(name, value)


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        CollisionParameters().get('unknown')


def test_copy_is_independent():
    params = CollisionParameters(cross_axes=True)
    params.set('clearance', 0.1)
    other = params.copy()
    other.set('clearance', 0.2)
    assert params.clearance == pytest.approx(0.1)
    assert other.cross_axes is True


def test_str():
    text = str(CollisionParameters(cross_axes=True))
    assert "Cross Axes: True" in text
    assert "Max Iterations" in text
