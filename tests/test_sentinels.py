#
# Varbrowse - Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varbrowse.sentinels import UNDEFINED, UNSET, UndefinedType, UnsetType, ifnotunset


# Tests ----------------------------------------------------------------------------------------------------------------

class TestSentinels:
    def test_singleton_identity(self):
        """Ensure each sentinel is a singleton object."""
        assert UNDEFINED is UndefinedType()
        assert UNSET is UnsetType()

    @pytest.mark.parametrize(
        ("sentinel", "expected"),
        [
            pytest.param(UNDEFINED, "<UNDEFINED>", id="undefined"),
            pytest.param(UNSET, "<UNSET>", id="unset"),
        ],
    )
    def test_repr_clean(self, sentinel, expected):
        """Assert repr shows clean angle-bracketed name."""
        assert repr(sentinel) == expected

    def test_distinct_and_falsy(self):
        """Sentinels differ from each other and from None, and are falsy."""
        assert UNDEFINED != UNSET
        assert UNDEFINED is not None
        assert not UNDEFINED
        assert not UNSET

    @pytest.mark.parametrize("sentinel", [UNDEFINED, UNSET], ids=["undefined", "unset"])
    def test_pickle_keeps_identity(self, sentinel):
        """Unpickled sentinel is the same singleton."""
        assert pickle.loads(pickle.dumps(sentinel)) is sentinel

    def test_hashable(self):
        """Sentinels can be used as dict keys."""
        d = {UNDEFINED: 1, UNSET: 2}
        assert d[UNDEFINED] == 1
        assert d[UNSET] == 2


class TestIfNotUnset:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(UNSET, "html", id="unset"),
            pytest.param(None, None, id="none"),
            pytest.param("text", "text", id="value"),
            pytest.param(UNDEFINED, UNDEFINED, id="undefined-passes"),
        ],
    )
    def test_default(self, value, expected):
        """Return default only for UNSET."""
        assert ifnotunset(value, default="html") == expected

    def test_default_factory(self):
        """Call default_factory for UNSET."""
        assert ifnotunset(UNSET, default_factory=lambda: [1]) == [1]

    def test_both_defaults_raise(self):
        """Reject default together with default_factory."""
        with pytest.raises(ValueError, match="both default and default_factory"):
            ifnotunset(UNSET, default=1, default_factory=lambda: 2)
