from .color_types import (
    RGBColor,
    LabColor,
    LChColor,
    ColorSpace,
    ColorTriple,
    element_to_array,
    resolve_space,
)
from .config_types import (
    LightnessBias,
    ChromaBias,
    ContrastLevel,
    TemperatureBias,
    LoopMode,
    VariationStrength,
    VariationDimension,
)

__all__ = [
    "RGBColor",
    "LabColor",
    "LChColor",
    "ColorSpace",
    "ColorTriple",
    "element_to_array",
    "resolve_space",
    "LightnessBias",
    "ChromaBias",
    "ContrastLevel",
    "TemperatureBias",
    "LoopMode",
    "VariationStrength",
    "VariationDimension",
]
