"""
builds the ODSQL filter expressions and percent-encoded query strings sent to the
opendatasoft catalog api
"""
from typing import Dict, Tuple
from urllib.parse import quote, urlencode


def escape_value(value: str) -> str:
    """
    escapes a value so it can be embedded in a double-quoted ODSQL string literal.
    backslashes are escaped first so an escaped quote cannot be un-escaped by the value itself.

    :param value: a free-text filter value
    :return: the escaped value
    """
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def like(field_name: str, value: str) -> str:
    """
    an ODSQL `like` clause matching a field against a free-text value
    """
    return f'{field_name} like "{escape_value(value)}"'


def where(*clauses: Tuple[str, str]) -> str:
    """
    joins (field, value) pairs into one ODSQL where expression

    :param clauses: (field name, free-text value) pairs
    :return: the expression, e.g. `marque like "RENAULT" and carburant like "Diesel"`
    """
    return " and ".join(like(field_name, value) for field_name, value in clauses)


def encode(params: Dict[str, object]) -> str:
    """
    percent-encodes query parameters, spaces as %20

    :param params: the query parameters, in order
    :return: the query string, without the leading '?'
    """
    return urlencode(params, quote_via=quote)


def encode_path_segment(segment: str) -> str:
    """
    percent-encodes a value to be embedded as a single url path segment
    """
    return quote(str(segment), safe="")
