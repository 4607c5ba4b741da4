"""morphisms public API."""

from .algorithms import (
    delete_firsts,
    delete_firsts_by,
    delete_l,
    delete_l_by,
    drop,
    drop_while,
    elem_index,
    elem_indices,
    find,
    find_index,
    find_indices,
    group,
    group_by,
    index,
    insert,
    insert_by,
    intercalate,
    intersperse,
    lookup,
    merge_sort,
    merge_sort_by,
    nub,
    nub_by,
    sort,
    sort_by,
    span,
    span_not,
    split_at,
    strip_prefix,
    take,
    take_while,
    transpose,
    zip,
    zip3,
    zip_with,
    zip_with3,
)
from .base import compose, constant, curried, even, flip, identity, odd, until
from .combinators import (
    DoBlock,
    ap,
    ap_flip,
    bind,
    bind_flip,
    chain,
    compare,
    do,
    fmap,
    fold,
    fold_map,
    foldr,
    greater_than,
    greater_than_or_equal,
    inject,
    is_eq,
    is_not_eq,
    join,
    less_than,
    less_than_or_equal,
    lift_a,
    lift_a2,
    lift_a3,
    lift_m,
    map_m,
    mappend,
    max,
    mconcat,
    mempty,
    min,
    null,
    pure,
    replace_by,
    sequence,
    skip,
    then,
    traverse,
)
from .errors import (
    EmptyStructureError,
    IndexOutOfRangeError,
    MalformedReturnError,
    MorphismError,
    NotApplicableError,
    TypeMismatchError,
)
from .generators import (
    cycle,
    iterate,
    list_filter,
    list_inf,
    list_inf_by,
    list_range,
    list_range_lazy,
    list_range_lazy_by,
    repeat,
    replicate,
)
from .lists import (
    EMPTY,
    List,
    append,
    cat_maybes,
    concat,
    concat_map,
    cons,
    filter,
    foldl,
    from_array_to_list,
    from_list_to_array,
    from_list_to_string,
    from_string_to_list,
    head,
    init,
    is_empty,
    is_list,
    last,
    lazy_list,
    length,
    list_of,
    list_to_maybe,
    map,
    map_maybe,
    maybe_to_list,
    reverse,
    scanl,
    scanr,
    tail,
    uncons,
)
from .maybe import NOTHING, Maybe, from_just, from_maybe, is_just, is_maybe, is_nothing, just, maybe
from .tuples import (
    UNIT,
    Tuple,
    curry,
    from_array_to_tuple,
    from_tuple_to_array,
    fst,
    is_tuple,
    is_unit,
    nth,
    snd,
    swap,
    tuple_of,
    uncurry,
)
from .typeclass import (
    EQ,
    GT,
    LT,
    Applicative,
    Eq,
    Foldable,
    Functor,
    Monad,
    Monoid,
    Ord,
    Ordering,
    Traversable,
    TypeClass,
    data_type,
    declared_type_classes,
    implements,
    instance,
    same_type,
    type_name,
)

try:
    from .arrays import from_jax_array_to_list, from_list_to_jax_array
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def from_jax_array_to_list(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_jax_array_to_list(). Install runtime deps first."
            ) from _jax_import_error

        def from_list_to_jax_array(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for from_list_to_jax_array(). Install runtime deps first."
            ) from _jax_import_error

    else:
        raise

__all__ = [
    "Applicative",
    "DoBlock",
    "EMPTY",
    "EQ",
    "EmptyStructureError",
    "Eq",
    "Foldable",
    "Functor",
    "GT",
    "IndexOutOfRangeError",
    "LT",
    "List",
    "MalformedReturnError",
    "Maybe",
    "Monad",
    "Monoid",
    "MorphismError",
    "NOTHING",
    "NotApplicableError",
    "Ord",
    "Ordering",
    "Traversable",
    "Tuple",
    "TypeClass",
    "TypeMismatchError",
    "UNIT",
    "ap",
    "ap_flip",
    "append",
    "bind",
    "bind_flip",
    "cat_maybes",
    "chain",
    "compare",
    "compose",
    "concat",
    "concat_map",
    "cons",
    "constant",
    "curried",
    "curry",
    "cycle",
    "data_type",
    "declared_type_classes",
    "delete_firsts",
    "delete_firsts_by",
    "delete_l",
    "delete_l_by",
    "do",
    "drop",
    "drop_while",
    "elem_index",
    "elem_indices",
    "even",
    "filter",
    "find",
    "find_index",
    "find_indices",
    "flip",
    "fmap",
    "fold",
    "fold_map",
    "foldl",
    "foldr",
    "from_array_to_list",
    "from_array_to_tuple",
    "from_jax_array_to_list",
    "from_just",
    "from_list_to_array",
    "from_list_to_jax_array",
    "from_list_to_string",
    "from_maybe",
    "from_string_to_list",
    "from_tuple_to_array",
    "fst",
    "greater_than",
    "greater_than_or_equal",
    "group",
    "group_by",
    "head",
    "identity",
    "implements",
    "index",
    "init",
    "inject",
    "insert",
    "insert_by",
    "instance",
    "intercalate",
    "intersperse",
    "is_empty",
    "is_eq",
    "is_just",
    "is_list",
    "is_maybe",
    "is_not_eq",
    "is_nothing",
    "is_tuple",
    "is_unit",
    "iterate",
    "join",
    "just",
    "last",
    "lazy_list",
    "length",
    "less_than",
    "less_than_or_equal",
    "lift_a",
    "lift_a2",
    "lift_a3",
    "lift_m",
    "list_filter",
    "list_inf",
    "list_inf_by",
    "list_of",
    "list_range",
    "list_range_lazy",
    "list_range_lazy_by",
    "list_to_maybe",
    "lookup",
    "map",
    "map_m",
    "map_maybe",
    "mappend",
    "max",
    "maybe",
    "maybe_to_list",
    "mconcat",
    "mempty",
    "merge_sort",
    "merge_sort_by",
    "min",
    "nth",
    "nub",
    "nub_by",
    "null",
    "odd",
    "pure",
    "repeat",
    "replace_by",
    "replicate",
    "reverse",
    "same_type",
    "scanl",
    "scanr",
    "sequence",
    "skip",
    "snd",
    "sort",
    "sort_by",
    "span",
    "span_not",
    "split_at",
    "strip_prefix",
    "swap",
    "tail",
    "take",
    "take_while",
    "then",
    "transpose",
    "traverse",
    "tuple_of",
    "type_name",
    "uncons",
    "uncurry",
    "until",
    "zip",
    "zip3",
    "zip_with",
    "zip_with3",
]
