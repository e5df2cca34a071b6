from __future__ import annotations

import codecs

from dynaconf import Dynaconf, Validator  # type: ignore[reportMissingTypeStubs]

OUTPUT_FORMATS: tuple[str, ...] = ("text", "html", "json")


def valid_encoding(encoding: str) -> bool:
    """Check that *encoding* names a codec known to Python.

    >>> valid_encoding("utf-8")
    True
    >>> valid_encoding("klingon")
    False
    """
    try:
        codecs.lookup(encoding)
    except LookupError:
        return False
    return True


config = Dynaconf(
    envvar_prefix="FCMP",
    settings_files=["fcmp.toml"],
    validators=[
        Validator("ignore_case", default=False, is_type_of=bool),
        Validator("output_format", default="text", is_in=OUTPUT_FORMATS),
        Validator("separator_width", default=80, is_type_of=int, gte=1),
        Validator("separator_char", default="*", is_type_of=str, len_eq=1),
        Validator("encoding", default="utf-8", is_type_of=str, condition=valid_encoding),
    ],
)


config.validators.validate()  # type: ignore[reportUnknownMemberType]
