"""
Tests for the canonical lens library.
"""
import pytest

from conftest import Coord, PLAYER1, PLAYER2, PLAYER3, PT1, PT2, Scene, \
    Vector, X, Y
from optics import Array, FieldLens, FieldReference, Just, Left, Nothing, \
    Pair, Right, SelfLens, attribute, both_of, chain, flat_map_optional, \
    flat_map_stream, function_arg, function_return, id_, item, lens, \
    list_elements, list_reduce, mapped, optional_element, pair_both, \
    pair_first, pair_second, set_elements, split, stream_elements, \
    union_left, union_right


def add(n):
    """Transformation adding n."""
    return lambda v: v + n


class TestCollections:
    """Tests for sequence, set and stream lenses."""

    def test_identity(self):
        """id_ applies the transformation to the whole."""
        assert id_()(add(1))(1) == 2

    def test_list_elements(self):
        """Elements are mapped into a list."""
        assert list_elements()(add(1))((1, 2, 3)) == [2, 3, 4]

    def test_list_reduce(self):
        """A curried combiner folds left to right."""
        concat = list_reduce()(lambda a: lambda b: a + b)
        assert concat(["a", "b", "c"]) == Just("abc")
        assert concat([]) is Nothing

    def test_set_elements(self):
        """Sets stay sets and frozensets stay frozen."""
        assert set_elements()(abs)({-1, 1, 2}) == {1, 2}
        result = set_elements()(abs)(frozenset({-3}))
        assert isinstance(result, frozenset)
        assert result == frozenset({3})

    def test_stream_elements_is_lazy(self):
        """Nothing is transformed until the stream is consumed."""
        seen = []
        stream = stream_elements()(lambda x: seen.append(x) or x * 2)(iter([1, 2]))
        assert seen == []
        assert list(stream) == [2, 4]

    def test_flat_map_stream(self):
        """Each element expands into zero or more results."""
        stream = flat_map_stream()(lambda x: [x] * x)([1, 0, 2])
        assert list(stream) == [1, 2, 2]

    def test_mapped(self):
        """mapped reaches into any functor."""
        assert mapped()(add(1))(Array((1, 2))) == Array((2, 3))
        assert mapped()(add(1))(Just(1)) == Just(2)
        assert mapped()(add(1))(Pair("k", 1)) == Pair("k", 2)


class TestOptionalElements:
    """Tests for Maybe lenses."""

    def test_optional_element(self):
        """Present values are mapped, absent ones stay absent."""
        assert optional_element()(add(1))(Just(1)) == Just(2)
        assert optional_element()(add(1))(Nothing) is Nothing

    def test_flat_map_optional(self):
        """The transformation may itself be absent."""
        positive = lambda x: Just(x) if x > 0 else Nothing
        assert flat_map_optional()(positive)(Just(3)) == Just(3)
        assert flat_map_optional()(positive)(Just(-3)) is Nothing

    def test_composes_into_records(self):
        """optional_element focuses through to a record field."""
        bump_x = optional_element().focus(lens("x"))
        assert bump_x(add(1))(Just(Coord(1, 1))) == Just(Coord(2, 1))


class TestFunctions:
    """Tests for function argument and return lenses."""

    def test_function_arg_precomposes(self):
        """The transformation runs before the function."""
        assert function_arg()(str)(len)(12345) == 5

    def test_function_return_postcomposes(self):
        """The transformation runs after the function."""
        assert function_return()(str)(len)([1, 2]) == "2"


class TestPairsAndUnions:
    """Tests for pair and union lenses."""

    def test_pair_components(self):
        """pair_first and pair_second touch one component."""
        assert pair_first()(str)(Pair(1, 2)) == Pair("1", 2)
        assert pair_second()(str)(Pair(1, 2)) == Pair(1, "2")

    def test_pair_both_order(self):
        """pair_both visits first then second."""
        seen = []
        pair_both()(lambda v: seen.append(v) or v)(Pair("a", "b"))
        assert seen == ["a", "b"]

    def test_union_branches(self):
        """Union lenses only act on their own branch."""
        assert union_left()(add(1))(Left(1)) == Left(2)
        assert union_left()(add(1))(Right(1)) == Right(1)
        assert union_right()(add(1))(Right(1)) == Right(2)
        assert union_right()(add(1))(Left(1)) == Left(1)


class TestMutableContainers:
    """Tests for attribute and item lenses."""

    def test_attribute(self):
        """attribute writes a plain attribute in place."""
        class Box:  # pylint: disable=too-few-public-methods
            """Plain object."""
            def __init__(self):
                self.size = 1
        box = Box()
        assert attribute("size")(add(2))(box) is box
        assert box.size == 3

    def test_item(self):
        """item writes a mapping entry in place."""
        scores = {"left": 1}
        item("left")(add(1))(scores)
        assert scores == {"left": 2}
        assert item("left").mutating

    def test_item_in_list_elements(self):
        """item composes after a collection lens."""
        rows = [[0, 0], [1, 1]]
        list_elements().focus(item(1))(add(5))(rows)
        assert rows == [[0, 5], [1, 6]]


class TestSplit:
    """Tests for split and both_of."""

    def test_writes_first_then_second(self):
        """The first part is written before the second."""
        writes = []
        cells = {"a": 0, "b": 0}

        def reference(key):
            def setter(v):
                writes.append(key)
                cells[key] = v
            return FieldReference.of(setter, lambda: cells[key])
        both = split(lambda _: reference("a"), lambda _: reference("b"))
        both(lambda p: Pair(p.first + 1, p.second + 2))(object())
        assert writes == ["a", "b"]
        assert cells == {"a": 1, "b": 2}

    def test_overlapping_second_write_wins(self):
        """When both lenses alias one cell, the second write is observed."""
        vector = Vector(1.0, 0.0)
        split(X, X)(lambda p: Pair(p.first * 10, p.second + 1))(vector)
        assert vector.x.get() == 2.0

    def test_pure_split(self):
        """split over pure lenses rebuilds the structure."""
        swapped = split(lens("x"), lens("y"))
        assert isinstance(swapped, SelfLens)
        assert not swapped.mutating
        assert swapped(lambda p: p.swap())(Coord(1, 2)) == Coord(2, 1)

    def test_split_is_mutating_with_field_lens(self):
        """A FieldLens on either side makes the split mutating."""
        assert split(X, lens("x")).mutating

    def test_both_of_adds_to_both(self):
        """both_of(x, y) with add 5 gives x = y = 5."""
        vector = Vector(0.0, 0.0)
        both_of(X, Y)(add(5))(vector)
        assert (vector.x.get(), vector.y.get()) == (5.0, 5.0)

    def test_both_of_focuses_further(self):
        """both_of composes with deeper lenses."""
        scene = Scene()
        paddle_ys = both_of(PT1, PT2).focus(Y)
        move = chain(*(FieldLens(player).focus(paddle_ys)(add(1.0))
                       for player in (PLAYER1, PLAYER2, PLAYER3)))
        assert move(scene) is scene
        assert scene.ys() == [1.0] * 6

    def test_both_of_pure(self):
        """both_of works on frozen records."""
        assert both_of(lens("x"), lens("y"))(add(1))(Coord(1, 2)) == Coord(2, 3)

    @pytest.mark.parametrize("players, expected", [
        ((PLAYER1,), [2.0, 2.0, 0.0, 0.0, 0.0, 0.0]),
        ((PLAYER2, PLAYER3), [0.0, 0.0, 2.0, 2.0, 2.0, 2.0]),
    ])
    def test_moves_only_selected_players(self, players, expected):
        """Players left out of the script stay put."""
        scene = Scene()
        for player in players:
            FieldLens(player).focus(both_of(PT1, PT2)).focus(Y)(add(2.0))(scene)
        assert scene.ys() == expected
