"""Composable scalar fields for procedural noise.

Fields are small immutable expression trees: sources such as
:class:`Constant` and :class:`Billow` sit at the leaves, and modifiers
and combiners derive new values from their children. Build a tree by
chaining, then sample it anywhere::

    from dynnoise import Billow, Constant

    terrain = Billow(seed=7).multiply(0.5).add(Constant(0.25)).clamp(-1, 1)
    height = terrain.evaluate(12.5, 0.0, -3.25)
"""

from .errors import FieldError, InvalidParameterError, InvertedBoundsError
from .vector import Point3, clamp_to_32_bits, to_cartesian
from .noise import Quality, gradient_coherent_noise3, linear_interp, s_curve3, s_curve5
from .config import (
    MAX_OCTAVE,
    MIN_OCTAVE,
    BillowSettings,
    load_billow_settings,
    load_billow_settings_file,
)
from .field import (
    Combine2Field,
    Combine3Field,
    Combine4Field,
    CompositeField,
    Field,
    ModifierField,
    SourceField,
    as_field,
)
from .sources import Billow, Constant
from .modifiers import Abs, Exp
from .combiners import Add, Blend, Clamped, Displace, Max, Min, Multiply, Subtract

__all__ = [
    "FieldError",
    "InvalidParameterError",
    "InvertedBoundsError",
    "Point3",
    "clamp_to_32_bits",
    "to_cartesian",
    "Quality",
    "gradient_coherent_noise3",
    "linear_interp",
    "s_curve3",
    "s_curve5",
    "MAX_OCTAVE",
    "MIN_OCTAVE",
    "BillowSettings",
    "load_billow_settings",
    "load_billow_settings_file",
    "Field",
    "SourceField",
    "CompositeField",
    "ModifierField",
    "Combine2Field",
    "Combine3Field",
    "Combine4Field",
    "as_field",
    "Constant",
    "Billow",
    "Abs",
    "Exp",
    "Add",
    "Subtract",
    "Multiply",
    "Min",
    "Max",
    "Blend",
    "Clamped",
    "Displace",
]
