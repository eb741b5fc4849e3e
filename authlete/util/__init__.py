# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing the helper functions shared by the Authlete SDK.

This package includes:
- Value coercion between the lenient wire format and strict Python types
- Guard functions used by DTO setters and API entry points
- JSON encoding/decoding that keeps large integers intact
- Configuration loading from environment variables and files
- The max_age freshness check
"""

from .language import (
    to_display_string, parse_boolean, parse_integer, or_zero, or_empty,
    get_from_dict, get_from_dict_as_boolean, get_from_env, enum_names,
    to_query_value
)
from .validation import (
    ensure_boolean, ensure_integer, ensure_string, ensure_string_or_integer,
    ensure_not_null, ensure_not_negative, ensure_null_or_string,
    ensure_null_or_integer, ensure_null_or_string_or_integer,
    ensure_null_or_type, ensure_null_or_list_of_string,
    ensure_null_or_list_of_type
)
from .encoding import (
    decode_json, decode_json_object, encode_json, extract_result_message
)
from .config import (
    get_config_value, get_bool_config, get_int_config, load_config_file,
    flatten_config
)
from .max_age import MaxAgeValidator

__all__ = [
    # Coercion
    'to_display_string', 'parse_boolean', 'parse_integer', 'or_zero',
    'or_empty', 'get_from_dict', 'get_from_dict_as_boolean', 'get_from_env',
    'enum_names', 'to_query_value',

    # Validation
    'ensure_boolean', 'ensure_integer', 'ensure_string',
    'ensure_string_or_integer', 'ensure_not_null', 'ensure_not_negative',
    'ensure_null_or_string', 'ensure_null_or_integer',
    'ensure_null_or_string_or_integer', 'ensure_null_or_type',
    'ensure_null_or_list_of_string', 'ensure_null_or_list_of_type',

    # JSON
    'decode_json', 'decode_json_object', 'encode_json', 'extract_result_message',

    # Configuration
    'get_config_value', 'get_bool_config', 'get_int_config',
    'load_config_file', 'flatten_config',

    # Max age
    'MaxAgeValidator',
]
