import re
from typing import List, Union

from ecs_cli_integ.constants import DEFAULT_ENCODING

_WHITESPACE_RUN = re.compile(r"\s+")


def to_str(obj: Union[str, bytes], encoding: str = DEFAULT_ENCODING, errors="strict") -> str:
    """If ``obj`` is an instance of ``binary_type``, return
    ``obj.decode(encoding, errors)``, otherwise return ``obj``"""
    return obj.decode(encoding, errors) if isinstance(obj, bytes) else obj


def get_row_values(row: str) -> List[str]:
    """
    Splits a row of tabular command output (e.g., ``ecs-cli ps``) into its column values. Any run of whitespace
    counts as a single separator.

    Note that a row with leading or trailing whitespace yields an empty first or last value.
    """
    return _WHITESPACE_RUN.sub(" ", row).split(" ")
