# No dependencies
from enum import Enum, IntFlag


class LightnessBias(str, Enum):
    NEUTRAL = "neutral"
    LIGHTER = "lighter"
    DARKER = "darker"
    CUSTOM = "custom"


class ChromaBias(str, Enum):
    NEUTRAL = "neutral"
    MUTED = "muted"
    VIVID = "vivid"
    CUSTOM = "custom"


class ContrastLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CUSTOM = "custom"


class TemperatureBias(str, Enum):
    NEUTRAL = "neutral"
    WARM = "warm"
    COOL = "cool"


class LoopMode(str, Enum):
    """
    Boundary behavior of the journey parameter.

    OPEN:     one-way journey, t clamped to [0, 1]
    CLOSED:   seamless loop, t wrapped so that 0 and 1 coincide
    PINGPONG: t reflected, 0 -> 1 -> 0
    """
    OPEN = "open"
    CLOSED = "closed"
    PINGPONG = "pingpong"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.lower().replace("-", "").replace("_", "")
            for member in cls:
                if member.value == key:
                    return member
        return None


class VariationStrength(str, Enum):
    SUBTLE = "subtle"
    NOTICEABLE = "noticeable"
    CUSTOM = "custom"


class VariationDimension(IntFlag):
    NONE = 0
    HUE = 1 << 0
    LIGHTNESS = 1 << 1
    CHROMA = 1 << 2
    ALL = HUE | LIGHTNESS | CHROMA


contrast_thresholds = {
    ContrastLevel.LOW: 0.05,
    ContrastLevel.MEDIUM: 0.10,
    ContrastLevel.HIGH: 0.15,
}

variation_magnitudes = {
    VariationStrength.SUBTLE: 0.02,
    VariationStrength.NOTICEABLE: 0.05,
}

chroma_multipliers = {
    ChromaBias.MUTED: 0.6,
    ChromaBias.VIVID: 1.4,
}

temperature_shifts = {
    TemperatureBias.WARM: 0.3,
    TemperatureBias.COOL: -0.3,
}
