""" imports for optics """
from .array import Array
from .combinators import id_, list_elements, list_reduce, set_elements, \
    stream_elements, flat_map_stream, mapped, optional_element, \
    flat_map_optional, function_arg, function_return, pair_first, \
    pair_second, pair_both, union_left, union_right, attribute, item, \
    split, both_of
from .errors import LensError, LazyLensError, MutatingLensError, ProbeLimitError, \
    FocusMismatchError
from .field import FieldReference, Field, AttributeReference, ItemReference
from .functions import identity, const, comp, chain
from .functor import Functor, map #pylint: disable=redefined-builtin
from .lens import Lens, SelfLens, FieldLens, as_lens, lens, view, set_, over
from .log import configure_logging
from .maybe import Maybe, Just, Nothing, from_maybe, to_maybe, is_just
from .pair import Pair
from .settings import OpticsSettings, get_settings, configure
from .union import DiscrimUnion, Left, Right
