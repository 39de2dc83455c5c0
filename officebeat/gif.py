"""GIF decoding and timed playback of the decoded animation frames.

Frames are rendered into RGBA byte canvases (four bytes a pixel, rows top
to bottom) that drawing code can turn into surfaces.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO

_MAX_CODES = 4096
_TRANSPARENT = b"\x00\x00\x00\x00"


class GifError(ValueError):
    """Raised when GIF data cannot be read or decoded."""


@dataclass
class GifBitmap:
    """An 8-bit indexed image."""

    w: int
    h: int
    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if not self.data:
            self.data = bytearray(self.w * self.h)
        elif len(self.data) != self.w * self.h:
            raise ValueError("bitmap data does not match its size")

    def blit(
        self, dest: GifBitmap, xf: int, yf: int, xt: int, yt: int, w: int, h: int
    ) -> None:
        """Copy a w by h block from (xf, yf) here to (xt, yt) in dest, clipped."""
        if w <= 0 or h <= 0:
            return
        if xf < 0:
            w += xf
            xt -= xf
            xf = 0
        if yf < 0:
            h += yf
            yt -= yf
            yf = 0
        w = min(w, self.w - xf)
        h = min(h, self.h - yf)
        if xt < 0:
            w += xt
            xf -= xt
            xt = 0
        if yt < 0:
            h += yt
            yf -= yt
            yt = 0
        w = min(w, dest.w - xt)
        h = min(h, dest.h - yt)
        if w <= 0 or h <= 0:
            return
        for row in range(h):
            src = (yf + row) * self.w + xf
            dst = (yt + row) * dest.w + xt
            dest.data[dst : dst + w] = self.data[src : src + w]


@dataclass
class GifPalette:
    """A colour table of (r, g, b) triples."""

    colors: list[tuple[int, int, int]] = field(default_factory=list)

    @property
    def colors_count(self) -> int:
        return len(self.colors)

    def color(self, index: int) -> tuple[int, int, int]:
        """The colour at index; entries past the table are black."""
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return (0, 0, 0)


@dataclass
class GifFrame:
    """One image of an animation; duration is in hundredths of a second."""

    bitmap: GifBitmap | None = None
    palette: GifPalette = field(default_factory=GifPalette)
    xoff: int = 0
    yoff: int = 0
    duration: int = 0
    disposal_method: int = 0
    transparent_index: int = -1
    rendered: bytes | None = None


@dataclass
class GifAnimation:
    """A decoded GIF with its playback state.

    ``loop`` is -1 for play once, 0 for forever, or a number of repeats.
    """

    width: int
    height: int
    frames: list[GifFrame] = field(default_factory=list)
    background_index: int = 0
    loop: int = 0
    palette: GifPalette = field(default_factory=GifPalette)
    start_time: float = 0.0
    done: bool = False
    display_index: int = 0
    duration: int = 0
    store: bytearray | None = None

    @property
    def frames_count(self) -> int:
        return len(self.frames)

    def frame_at(self, seconds: float) -> bytes | None:
        """The rendered frame to show at the given clock time."""
        if not self.frames:
            raise GifError("animation has no frames")
        if self.done or self.start_time == 0:
            self.start_time = seconds
            self.display_index = 0
            self.done = False
        elapsed = seconds - self.start_time
        total = self.duration / 100.0
        finished_once = self.loop == -1 and elapsed > total
        finished_all = self.loop > 0 and elapsed > total * self.loop
        if finished_once or finished_all:
            self.done = True
            self.start_time = 0
            self.display_index = 0
            return self.frames[0].rendered
        if total == 0:
            return self.frames[0].rendered
        elapsed = math.fmod(elapsed, total)
        acc = 0.0
        for index, frame in enumerate(self.frames):
            acc += frame.duration / 100.0
            if elapsed < acc:
                self.display_index = index
                return frame.rendered
        return self.frames[0].rendered

    def frame(self, index: int) -> bytes | None:
        """The rendered image of one frame."""
        return self.frames[index].rendered

    def frame_duration(self, index: int) -> float:
        """How long one frame is shown, in seconds."""
        return self.frames[index].duration / 100.0


def _getc(stream: BinaryIO) -> int:
    chunk = stream.read(1)
    return chunk[0] if chunk else -1


def _byte(stream: BinaryIO) -> int:
    value = _getc(stream)
    if value < 0:
        raise GifError("unexpected end of GIF data")
    return value


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise GifError("unexpected end of GIF data")
    return data


def _read16(stream: BinaryIO) -> int:
    low, high = _read_exact(stream, 2)
    return low | high << 8


def _read_palette(stream: BinaryIO, count: int) -> GifPalette:
    raw = _read_exact(stream, count * 3)
    return GifPalette([tuple(raw[i : i + 3]) for i in range(0, len(raw), 3)])


class _CodeReader:
    """Reads variable-width LZW codes from GIF data sub-blocks."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buf = bytearray(256)
        self._bit_pos = 0

    def read(self, bit_size: int) -> int:
        code = 0
        for bit in range(bit_size):
            byte_pos = (self._bit_pos >> 3) & 255
            if byte_pos == 0:
                data_len = _getc(self._stream)
                if data_len <= 0:
                    raise GifError("erroneous GIF data stream")
                byte_pos = 256 - data_len
                self._buf[byte_pos:] = _read_exact(self._stream, data_len)
                self._bit_pos = byte_pos << 3
            if self._buf[byte_pos] & (1 << (self._bit_pos & 7)):
                code |= 1 << bit
            self._bit_pos += 1
        return code


def lzw_decode(stream: BinaryIO, bitmap: GifBitmap) -> None:
    """Decode LZW image data from the stream into the bitmap's pixels."""
    orig_bit_size = _getc(stream)
    if not 0 <= orig_bit_size <= 11:
        raise GifError("invalid LZW minimum code size")
    prefixes = [0] * _MAX_CODES
    chars = [0] * _MAX_CODES
    lengths = [0] * _MAX_CODES
    n = 2 + (1 << orig_bit_size)
    chars[:n] = range(n)
    clear_marker = n - 2
    end_marker = n - 1
    bit_size = orig_bit_size + 1

    data = bitmap.data
    size = len(data)

    def put(position: int, value: int) -> None:
        if 0 <= position < size:
            data[position] = value

    reader = _CodeReader(stream)
    prev = reader.read(bit_size)
    out_pos = 0
    while True:
        code = reader.read(bit_size)
        if code == clear_marker:
            n = (1 << orig_bit_size) + 2
            bit_size = orig_bit_size + 1
            prev = code
            continue
        if code == end_marker:
            break

        c = code if code < n else prev
        out_pos += lengths[c]
        for back in range(_MAX_CODES + 1):
            put(out_pos - back, chars[c])
            if not lengths[c]:
                break
            c = prefixes[c]
        else:
            raise GifError("corrupt LZW code table")
        out_pos += 1

        if code >= n:
            put(out_pos, chars[c])
            out_pos += 1

        if prev != clear_marker and n < _MAX_CODES:
            prefixes[n] = prev
            lengths[n] = lengths[prev] + 1
            chars[n] = chars[c]
            n += 1

        if n == 1 << bit_size and bit_size < 12:
            bit_size += 1
        prev = code


def deinterlace(bitmap: GifBitmap) -> None:
    """Reorder the rows of an interlaced image into top-to-bottom order."""
    ordered = GifBitmap(bitmap.w, bitmap.h)
    passes = ((0, 8), (4, 8), (2, 4), (1, 2))
    rows = (y for start, step in passes for y in range(start, ordered.h, step))
    for source_row, y in enumerate(rows):
        bitmap.blit(ordered, 0, source_row, 0, y, ordered.w, 1)
    ordered.blit(bitmap, 0, 0, 0, 0, ordered.w, ordered.h)


def _read_extension(stream: BinaryIO, animation: GifAnimation, frame: GifFrame) -> None:
    kind = _byte(stream)
    size = _byte(stream)
    if kind == 0xF9:
        if size != 4:
            raise GifError("bad graphic control extension")
        packed = _byte(stream)
        frame.disposal_method = (packed >> 2) & 7
        frame.duration = _read16(stream)
        if packed & 1:
            frame.transparent_index = _byte(stream)
        else:
            _read_exact(stream, 1)
            frame.transparent_index = -1
        size = _byte(stream)
    elif kind == 0xFF and size == 11:
        name = _read_exact(stream, 11)
        size = _byte(stream)
        if name == b"NETSCAPE2.0" and size == 3:
            sub_block = _byte(stream)
            loop = _read16(stream)
            animation.loop = loop if sub_block == 1 else 0
            size = _byte(stream)
    while size:
        _read_exact(stream, size)
        size = _byte(stream)


def _read_image(stream: BinaryIO, frame: GifFrame) -> None:
    frame.xoff = _read16(stream)
    frame.yoff = _read16(stream)
    width = _read16(stream)
    height = _read16(stream)
    bitmap = GifBitmap(width, height)
    flags = _byte(stream)
    if flags & 128:
        frame.palette = _read_palette(stream, 1 << ((flags & 7) + 1))
    else:
        frame.palette = GifPalette()
    lzw_decode(stream, bitmap)
    if flags & 64:
        deinterlace(bitmap)
    frame.bitmap = bitmap


def load_raw(stream: BinaryIO) -> GifAnimation:
    """Parse GIF data into an animation whose frames are not yet rendered."""
    if _read_exact(stream, 4) != b"GIF8":
        raise GifError("not a GIF file")
    if _byte(stream) not in (ord("7"), ord("9")):
        raise GifError("unsupported GIF version")
    if _byte(stream) != ord("a"):
        raise GifError("unsupported GIF version")

    animation = GifAnimation(width=_read16(stream), height=_read16(stream))
    flags = _byte(stream)
    global_colors = 1 << ((flags & 7) + 1) if flags & 128 else 0
    animation.background_index = _byte(stream)
    _read_exact(stream, 1)  # pixel aspect ratio
    if global_colors:
        animation.palette = _read_palette(stream, global_colors)

    frame = GifFrame()
    while True:
        marker = _getc(stream)
        if marker < 0:
            raise GifError("unexpected end of GIF data")
        if marker == 0x2C:
            _read_image(stream, frame)
            animation.frames.append(frame)
            frame = GifFrame()
        elif marker == 0x21:
            _read_extension(stream, animation, frame)
        elif marker == 0x3B:
            return animation


def _regions(width: int, height: int, x: int, y: int, w: int, h: int):
    """Byte slices of a canvas covered by a clipped rectangle, row by row."""
    x0, x1 = max(0, x), min(width, x + w)
    if x0 >= x1:
        return
    for row in range(max(0, y), min(height, y + h)):
        yield (row * width + x0) * 4, (row * width + x1) * 4


def render_frame(animation: GifAnimation, index: int, canvas: bytearray) -> None:
    """Draw one frame onto an RGBA canvas the size of the animation.

    Frames are meant to be drawn in order on the same canvas so that each
    frame's disposal method is honoured.
    """
    width, height = animation.width, animation.height
    if len(canvas) != width * height * 4:
        raise ValueError("canvas does not match the animation size")
    frame = animation.frames[index]
    if frame.bitmap is None:
        raise GifError("frame has no image data")

    if index == 0:
        canvas[:] = bytes(len(canvas))
    else:
        prev = animation.frames[index - 1]
        pw = prev.bitmap.w if prev.bitmap else 0
        ph = prev.bitmap.h if prev.bitmap else 0
        if prev.disposal_method == 2:
            for start, stop in _regions(width, height, prev.xoff, prev.yoff, pw, ph):
                canvas[start:stop] = _TRANSPARENT * ((stop - start) // 4)
        elif prev.disposal_method == 3 and animation.store is not None:
            store = animation.store
            for start, stop in _regions(width, height, prev.xoff, prev.yoff, pw, ph):
                canvas[start:stop] = store[start:stop]
            animation.store = None

    if frame.disposal_method == 3:
        animation.store = bytearray(canvas)

    palette = frame.palette if frame.palette.colors_count else animation.palette
    bitmap = frame.bitmap
    for y in range(bitmap.h):
        ty = frame.yoff + y
        if not 0 <= ty < height:
            continue
        row = bitmap.data[y * bitmap.w : (y + 1) * bitmap.w]
        for x, value in enumerate(row):
            tx = frame.xoff + x
            if value == frame.transparent_index or not 0 <= tx < width:
                continue
            offset = (ty * width + tx) * 4
            canvas[offset : offset + 4] = bytes((*palette.color(value), 255))


def _render_all(animation: GifAnimation) -> None:
    animation.duration = 0
    for index, frame in enumerate(animation.frames):
        canvas = bytearray(animation.width * animation.height * 4)
        render_frame(animation, index, canvas)
        frame.rendered = bytes(canvas)
        animation.duration += frame.duration


def load_animation(path: str | PathLike[str]) -> GifAnimation:
    """Load a GIF file and render every frame."""
    try:
        with open(path, "rb") as stream:
            animation = load_raw(stream)
    except OSError as exc:
        raise GifError(f"cannot read GIF file {path}") from exc
    _render_all(animation)
    return animation


def new_gif(path: str | PathLike[str], loop: int) -> GifAnimation:
    """Load a GIF file ready for playback with the given loop setting."""
    animation = load_animation(path)
    animation.loop = loop
    animation.start_time = 0
    animation.display_index = 0
    animation.done = False
    return animation