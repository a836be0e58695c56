# Shared type hints

from typing import Any, Dict, Tuple, Union

# Width and height in internal units
Size = Tuple[int, int]

# Column and row in internal units
Corner = Tuple[int, int]

# Anything the engine accepts as a {width, height} pair in pixels
PixelSize = Union[Dict[str, float], Tuple[float, float], Any]
