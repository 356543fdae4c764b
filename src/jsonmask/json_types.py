from __future__ import annotations

"""JSON value types flowing through jsonmask.

`JSONValue` is what `runtime.json_io` parses and what the obfuscation context
walks and returns; `JSONNumber` is the carrier the value table keys by
sub-kind. Objects are plain `dict`s, so key order survives obfuscation.
"""

from typing import TypeAlias


JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
JSONNumber: TypeAlias = int | float
