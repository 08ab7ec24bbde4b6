"""Utilities to manipulate several python objects."""

from typing import List


def str_first_element(errors: List) -> str:
    try:
        first_error = errors[0]
    except (KeyError, TypeError):
        first_error = errors

    if isinstance(first_error, dict) and "message" in first_error:
        return str(first_error["message"])

    return str(first_error)
