"""masonry-quilt: masonry layout calculation without rendering.

Items in, pixel positions out. The engine tiles a container with cards in
variable-height columns, honoring per-item size and aspect ratio hints, and
reports how well the space is used and how closely the input order survived.

MIT License

Copyright (c) 2026 The masonry-quilt developers

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

__version__ = "2.0.0"

from .calculator import calculate_layout  # noqa: E402
from .errors import LayoutError, OptionsError  # noqa: E402
from .options import LayoutOptions  # noqa: E402
from .results import LayoutResult, PlacedCard  # noqa: E402
