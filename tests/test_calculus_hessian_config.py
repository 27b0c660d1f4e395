"""Unit tests for hesskit/calculus/hessian_config.py."""

from hesskit.calculus.hessian_config import HessianSettings


def test_defaults():
    """Defaults select the default step, an evaluated origin and the serial path."""
    s = HessianSettings()
    assert s.step == 0.0
    assert s.origin_known is False
    assert s.origin_value == 0.0
    assert s.concurrent is False
    assert s.n_workers is None


def test_values_are_coerced():
    """Arguments are coerced to their declared types."""
    s = HessianSettings(step=1, origin_known=1, origin_value=3, concurrent="yes", n_workers=2.0)
    assert isinstance(s.step, float) and s.step == 1.0
    assert s.origin_known is True
    assert isinstance(s.origin_value, float)
    assert s.concurrent is True
    assert s.n_workers == 2 and isinstance(s.n_workers, int)


def test_repr_lists_fields():
    """repr shows every setting."""
    text = repr(HessianSettings(step=0.5, concurrent=True))
    assert "step=0.5" in text
    assert "concurrent=True" in text
    assert "n_workers=None" in text
