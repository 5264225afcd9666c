"""Unit tests for the equality protocol."""

from __future__ import annotations

from typing import Any, Protocol, Self

import pytest

from valkit.kernel.equality import Equatable, equals


class SameEquatable(Equatable["SameEquatable"]):
    def __init__(self, value: Any) -> None:
        self.value = value

    def equals(self, other: SameEquatable) -> bool:
        return self.value == other.value


class VaryEquatable(Equatable[int]):
    def __init__(self, value: int) -> None:
        self.value = value

    def equals(self, other: int) -> bool:
        return self.value == other


class SelfEquatable(Equatable[Any]):
    def __init__(self, value: Any) -> None:
        self.value = value

    def equals(self, other: Self) -> bool:
        return self.value == other.value


class UnionEquatable(Equatable[Any]):
    def __init__(self, value: int) -> None:
        self.value = value

    def equals(self, other: int | str) -> bool:
        return str(self.value) == str(other)


class PinnedEquatable(Equatable[Any]):
    equatable_type = float

    def __init__(self, value: float) -> None:
        self.value = value

    def equals(self, other):  # noqa: ANN001
        return self.value == other


class Named(Protocol):
    name: str


class StructuralEquatable(Equatable[Any]):
    def __init__(self, name: str) -> None:
        self.name = name

    def equals(self, other: Named) -> bool:
        return getattr(other, "name", None) == self.name


# ---------------------------------------------------------------------------
# equals()
# ---------------------------------------------------------------------------


class TestEquals:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (None, None),
            (True, True),
            (1.23, 1.23),
            (123, 123),
            ("foo", "foo"),
            ([1, 2, 3], [1, 2, 3]),
            ((1, "a"), (1, "a")),
            (SameEquatable(123), SameEquatable(123)),
        ],
    )
    def test_equal_values(self, a: Any, b: Any) -> None:
        assert equals(a, b) is True
        assert equals(b, a) is True

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (True, False),
            (None, False),
            ("", None),
            (1.23, 2.34),
            (1.23, 123),
            (123, 234),
            (1, 1.0),
            (True, 1),
            ([1, 2, 3], [3, 2, 1]),
            ([1, 2], (1, 2)),
            (SameEquatable(123), None),
            (SameEquatable(123), SameEquatable(234)),
            (SameEquatable(123), VaryEquatable(123)),
        ],
    )
    def test_unequal_values(self, a: Any, b: Any) -> None:
        assert equals(a, b) is False
        assert equals(b, a) is False

    def test_equatable_compares_against_declared_operand_type(self) -> None:
        assert equals(VaryEquatable(123), 123) is True
        assert equals(VaryEquatable(123), 234) is False

    def test_operand_side_decides(self) -> None:
        # Only the left operand's capability is consulted.
        assert equals(123, VaryEquatable(123)) is False

    def test_type_mismatch_returns_false_without_calling_equals(self) -> None:
        class Exploding(Equatable["Exploding"]):
            def equals(self, other: Exploding) -> bool:
                raise AssertionError("must not be reached")

        assert equals(Exploding(), "not an Exploding") is False
        assert equals(Exploding(), None) is False

    def test_nan_is_equal_to_itself(self) -> None:
        nan = float("nan")
        assert equals(nan, nan) is True

    def test_identity_is_equal(self) -> None:
        obj = object()
        assert equals(obj, obj) is True
        assert equals(obj, object()) is False


# ---------------------------------------------------------------------------
# Operand type resolution
# ---------------------------------------------------------------------------


class TestEquatableOperand:
    def test_forward_reference_to_own_class(self) -> None:
        assert SameEquatable.equatable_operand() == (SameEquatable,)

    def test_builtin_operand(self) -> None:
        assert VaryEquatable.equatable_operand() == (int,)

    def test_self_annotation(self) -> None:
        assert SelfEquatable.equatable_operand() == (SelfEquatable,)
        assert equals(SelfEquatable(1), SelfEquatable(1)) is True
        assert equals(SelfEquatable(1), 1) is False

    def test_union_annotation(self) -> None:
        assert UnionEquatable.equatable_operand() == (int, str)
        assert equals(UnionEquatable(5), "5") is True
        assert equals(UnionEquatable(5), 5) is True
        assert equals(UnionEquatable(5), 5.0) is False

    def test_pinned_operand_type(self) -> None:
        assert PinnedEquatable.equatable_operand() == (float,)
        assert equals(PinnedEquatable(1.5), 1.5) is True
        assert equals(PinnedEquatable(1.5), "1.5") is False

    def test_non_runtime_protocol_accepts_anything(self) -> None:
        assert StructuralEquatable.equatable_operand() == (object,)
        assert equals(StructuralEquatable("x"), SameEquatable(0)) is False
        assert equals(StructuralEquatable("x"), StructuralEquatable("x")) is True

    def test_equatable_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Equatable()  # type: ignore[abstract]
