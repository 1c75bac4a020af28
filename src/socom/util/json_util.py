import json
from dataclasses import is_dataclass, asdict
from enum import Enum
from pathlib import PurePath


class EnhancedJSONEncoder(json.JSONEncoder):
    """JSON encoder for dumps: dataclasses become dicts, enums their name, paths strings, bytes a short hex preview."""

    BYTES_PREVIEW = 16

    def default(self, o):
        if is_dataclass(o):
            return asdict(o)
        elif isinstance(o, Enum):
            return o.name
        elif isinstance(o, PurePath):
            return str(o)
        elif isinstance(o, (bytes, bytearray)):
            preview = bytes(o[:self.BYTES_PREVIEW]).hex(sep=" ")
            hidden = len(o) - self.BYTES_PREVIEW
            return preview + f" ... [+{hidden} Bytes]" if hidden > 0 else preview
        else:
            return super().default(o)
