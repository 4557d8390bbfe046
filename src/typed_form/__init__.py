"""typed-form — decode typed form field names into nested records."""

from .casters import (
    cast_boolean,
    cast_date,
    cast_json,
    cast_number,
    cast_value,
    split_array_value,
)
from .decoder import decode_entries, parse_typed_form, strip_empty
from .errors import (
    CastError,
    InvalidBoolean,
    InvalidDate,
    InvalidFieldName,
    InvalidJson,
    InvalidNumber,
    OptionsError,
    TypedFormError,
)
from .field_name import parse_field_name, parse_list_field
from .getter import get_deep
from .merge import merge_value
from .model import (
    Absent,
    ArrayField,
    FieldType,
    ListEntry,
    ListField,
    ParseOptions,
    ScalarField,
    is_attachment,
)
from .pairs import assemble_list_entries
from .setter import set_deep
from .sources import iter_entries

__all__ = [
    "parse_typed_form",
    "decode_entries",
    "strip_empty",
    "iter_entries",
    "parse_field_name",
    "parse_list_field",
    "cast_value",
    "cast_number",
    "cast_boolean",
    "cast_date",
    "cast_json",
    "split_array_value",
    "get_deep",
    "set_deep",
    "merge_value",
    "assemble_list_entries",
    "Absent",
    "ArrayField",
    "FieldType",
    "ListEntry",
    "ListField",
    "ParseOptions",
    "ScalarField",
    "is_attachment",
    "TypedFormError",
    "InvalidFieldName",
    "OptionsError",
    "CastError",
    "InvalidNumber",
    "InvalidBoolean",
    "InvalidDate",
    "InvalidJson",
]
