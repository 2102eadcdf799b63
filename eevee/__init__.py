"""Composable validation pipelines for configuration values.

Read a key from any key-value source and coerce it into a typed,
validated value::

    from eevee import as_int, bind, must, pipe

    env = bind(os.environ)
    port = env("PORT", pipe(must, as_int))
"""

from eevee.binder import Applier, Eevee, bind
from eevee.envelope import REDACTED_VALUE, VT, Transformer, V, VRaw
from eevee.errors import (
    DurationUnitError,
    EeveeError,
    InvalidValueError,
    LookupErrorClass,
    MissingValueError,
)
from eevee.evaluate import ev, evaluate
from eevee.pipeline import Pipeline, pipe
from eevee.reader import (
    BasicReader,
    FunctionReader,
    MappingReader,
    Reader,
    as_reader,
)
from eevee.transforms import as_bool, as_duration, as_int, as_iso_date, must, secret


__all__ = [
    # binder.py
    "Applier",
    "Eevee",
    "bind",
    # envelope.py
    "REDACTED_VALUE",
    "Transformer",
    "V",
    "VRaw",
    "VT",
    # errors.py
    "DurationUnitError",
    "EeveeError",
    "InvalidValueError",
    "LookupErrorClass",
    "MissingValueError",
    # evaluate.py
    "ev",
    "evaluate",
    # pipeline.py
    "Pipeline",
    "pipe",
    # reader.py
    "BasicReader",
    "FunctionReader",
    "MappingReader",
    "Reader",
    "as_reader",
    # transforms.py
    "as_bool",
    "as_duration",
    "as_int",
    "as_iso_date",
    "must",
    "secret",
]
