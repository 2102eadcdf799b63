"""Unit tests for reader adapters."""

from types import MappingProxyType

import pytest

from eevee.envelope import V
from eevee.reader import FunctionReader, MappingReader, Reader, as_reader


class TestMappingReader:
    """Tests for MappingReader."""

    def test_reads_present_key(self) -> None:
        v = MappingReader({"KEY": "v"})("KEY")
        assert v == V(value="v", name="KEY", secret=False)

    def test_missing_key_reads_none(self) -> None:
        v = MappingReader({})("MISSING")
        assert v.value is None
        assert v.name == "MISSING"
        assert v.secret is False

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MappingReader({}), Reader)


class TestFunctionReader:
    """Tests for FunctionReader."""

    def test_returns_envelope_from_function(self) -> None:
        reader = FunctionReader(lambda name: V(value="s3cr3t", name=name, secret=True))
        v = reader("TOKEN")
        assert v.value == "s3cr3t"
        assert v.secret is True

    def test_rejects_non_envelope(self) -> None:
        reader = FunctionReader(lambda name: "plain")  # type: ignore[arg-type,return-value]
        with pytest.raises(TypeError, match="expected V"):
            reader("KEY")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(FunctionReader(lambda name: V(value=None, name=name)), Reader)


class TestAsReader:
    """Tests for as_reader dispatch."""

    def test_mapping(self) -> None:
        assert isinstance(as_reader({"A": "1"}), MappingReader)

    def test_read_only_mapping(self) -> None:
        reader = as_reader(MappingProxyType({"A": "1"}))
        assert reader("A").value == "1"

    def test_callable(self) -> None:
        assert isinstance(as_reader(lambda name: V(value=None, name=name)), FunctionReader)

    def test_adapters_pass_through(self) -> None:
        reader = MappingReader({})
        assert as_reader(reader) is reader

    @pytest.mark.parametrize("source", [42, "KEY=value", ["KEY"]])
    def test_unsupported(self, source: object) -> None:
        with pytest.raises(TypeError, match="Unsupported reader type"):
            as_reader(source)  # type: ignore[arg-type]
