# No dependencies
from enum import Enum


class BitDepth(str, Enum):
    EIGHT = "8"
    SIXTEEN = "16"


max_value = {
    BitDepth.EIGHT: 0xff,
    BitDepth.SIXTEEN: 0xffff,
}

# Multiplying an 8-bit channel by this copies it into both bytes of a 16-bit channel.
REPLICATE_8_TO_16 = 0x101

# Shift that takes a 16-bit channel back down to 8 bits.
TRUNCATE_16_TO_8 = 8

OPAQUE_16 = max_value[BitDepth.SIXTEEN]
