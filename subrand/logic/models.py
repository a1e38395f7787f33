"""Generator state models."""
import struct
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from subrand.errors import InvalidArgumentError
from subrand.validators import INT32_MAX, INT32_MIN


STATE_SIZE = 56

# inext, inextp, then seed_array[0..55]; little-endian, no padding
STATE_LAYOUT = struct.Struct(f"<{STATE_SIZE + 2}i")

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class StateSnapshot(BaseModel):
    """
    Exact copy of a generator's internal state.

    Holds both rolling indices and all 56 array entries. Restoring it makes
    the generator continue precisely from the captured point. Immutable and
    detached from the generator it was taken from.
    """

    model_config = ConfigDict(frozen=True)

    inext: int = Field(ge=0, lt=STATE_SIZE)
    inextp: int = Field(ge=0, lt=STATE_SIZE)
    seed_array: tuple[Int32, ...] = Field(
        min_length=STATE_SIZE, max_length=STATE_SIZE
    )

    def to_bytes(self) -> bytes:
        """Pack into the 232-byte binary layout."""
        return STATE_LAYOUT.pack(self.inext, self.inextp, *self.seed_array)

    @classmethod
    def from_bytes(cls, data: bytes) -> "StateSnapshot":
        """
        Unpack from the 232-byte binary layout.

        Raises INVALID_ARGUMENT if data has the wrong size or holds
        out-of-range indices.
        """
        if len(data) != STATE_LAYOUT.size:
            raise InvalidArgumentError(
                "data",
                f"State layout is {STATE_LAYOUT.size} bytes, got {len(data)}.",
            )
        inext, inextp, *seed_array = STATE_LAYOUT.unpack(data)
        if not (0 <= inext < STATE_SIZE and 0 <= inextp < STATE_SIZE):
            raise InvalidArgumentError(
                "data",
                f"State indices out of range: inext={inext}, inextp={inextp}.",
            )
        return cls(inext=inext, inextp=inextp, seed_array=tuple(seed_array))
