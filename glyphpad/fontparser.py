"""TrueType parsing: table directory, cmap, loca, glyf and horizontal metrics."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Union

from glyphpad.fontdata import CompoundData, Font, GlyphData, Point
from glyphpad.fontreader import FontReader

_ON_CURVE = 0
_REPEAT = 3


class FontFormatError(ValueError):
    """Raised when font data does not have the expected structure."""


def bit_set(flag: int, index: int) -> bool:
    return (flag >> index) & 1 == 1


def _table(tables: dict[str, int], tag: str) -> int:
    try:
        return tables[tag]
    except KeyError:
        raise FontFormatError(f"missing table {tag!r}") from None


def parse(path: Union[str, Path]) -> Font:
    """Parse the TrueType font stored at ``path``."""
    return parse_bytes(Path(path).read_bytes())


def parse_bytes(data: bytes) -> Font:
    """Parse a TrueType font held in memory."""
    reader = FontReader(data)
    tables = read_lookup_table(reader)
    reader.go_to(_table(tables, "head"))
    reader.skip(18)
    units_per_em = reader.read_uint16()
    reader.skip(30)
    short_offsets = reader.read_int16() == 0
    glyph_count = read_max_glyph(reader, _table(tables, "maxp"))
    loca = read_loc_glyph(reader, _table(tables, "loca"), glyph_count, short_offsets)
    cmap = read_cmap(reader, _table(tables, "cmap"))
    glyphs = read_glyphs(reader, _table(tables, "glyf"), loca, cmap)
    read_font_spacing(reader, _table(tables, "hmtx"), _table(tables, "hhea"), glyphs)
    return Font(glyphs, units_per_em)


def read_lookup_table(reader: FontReader) -> dict[str, int]:
    """Read the table directory into a map from tag to file offset."""
    reader.skip(4)
    table_count = reader.read_uint16()
    reader.skip(6)
    tables = {}
    for _ in range(table_count):
        tag = reader.read_string(4)
        reader.skip(4)
        tables[tag] = reader.read_uint32()
        reader.skip(4)
    return tables


def read_max_glyph(reader: FontReader, maxp_offset: int) -> int:
    reader.go_to(maxp_offset)
    reader.skip(4)
    return reader.read_uint16()


def read_loc_glyph(
    reader: FontReader, loca_offset: int, glyph_count: int, short_offset: bool
) -> list[int]:
    """Read ``glyph_count + 1`` glyph offsets relative to the glyf table."""
    reader.go_to(loca_offset)
    if short_offset:
        return [reader.read_uint16() * 2 for _ in range(glyph_count + 1)]
    return [reader.read_int32() for _ in range(glyph_count + 1)]


def read_cmap(reader: FontReader, cmap_offset: int) -> dict[int, int]:
    """Read a format 4 cmap into a map from glyph index to code point."""
    reader.go_to(cmap_offset)
    reader.read_uint16()
    subtable_count = reader.read_uint16()
    offset = 0
    for _ in range(subtable_count):
        platform = reader.read_int16()
        encoding = reader.read_int16()
        offset = reader.read_uint32()
        if (platform, encoding) == (0, 3):
            break

    reader.go_to(cmap_offset + offset)
    fmt = reader.read_uint16()
    if fmt != 4:
        raise FontFormatError(f"unsupported cmap format {fmt}")
    reader.skip(4)
    seg_count = reader.read_uint16() // 2
    reader.skip(6)
    end_codes = [reader.read_uint16() for _ in range(seg_count)]
    reader.skip(2)
    start_codes = [reader.read_uint16() for _ in range(seg_count)]
    deltas = [reader.read_uint16() for _ in range(seg_count)]
    range_offsets = []
    for _ in range(seg_count):
        address = reader.location
        range_offsets.append((address, reader.read_uint16()))

    mapping: dict[int, int] = {}
    for start, end, delta, (address, range_offset) in zip(
        start_codes, end_codes, deltas, range_offsets
    ):
        for code in range(start, end + 1):
            if range_offset == 0:
                glyph_index = (delta + code) % 65536
            else:
                reader.go_to(range_offset + 2 * (code - start) + address)
                glyph_index = reader.read_uint16()
                if glyph_index:
                    glyph_index = (glyph_index + delta) % 65536
            mapping[glyph_index] = code
    return dict(sorted(mapping.items()))


def read_glyphs(
    reader: FontReader, glyph_offset: int, loca: list[int], cmap: dict[int, int]
) -> list[GlyphData]:
    """Read every mapped, non-empty glyph in glyph-index order."""
    glyphs: list[GlyphData] = []
    if len(loca) < 2:
        return glyphs
    for glyph_index, code in sorted(cmap.items()):
        if glyph_index < 0 or glyph_index + 1 >= len(loca):
            continue
        start, end = loca[glyph_index], loca[glyph_index + 1]
        if start == end or start < 0 or end < 0:
            continue
        reader.go_to(glyph_offset + start)
        if reader.read_int16() >= 0:
            glyph = read_simple_glyph(reader, glyph_offset + start)
        else:
            compound = read_compound_glyph(reader, glyph_offset + start)
            glyph = _assemble_compound(reader, glyph_offset, loca, compound)
        glyph.unicode = code
        glyphs.append(glyph)
    return glyphs


def _assemble_compound(
    reader: FontReader, glyph_offset: int, loca: list[int], compound: CompoundData
) -> GlyphData:
    glyph = GlyphData()
    for index, dx, dy in zip(
        compound.glyph_indices, compound.x_offsets, compound.y_offsets
    ):
        if index >= len(loca):
            raise FontFormatError(f"component glyph {index} out of range")
        part = read_simple_glyph(reader, glyph_offset + loca[index])
        base = len(glyph.coords)
        glyph.contour_indices.extend(base + end for end in part.contour_indices)
        glyph.coords.extend(replace(p, x=p.x + dx, y=p.y + dy) for p in part.coords)
    return glyph


def read_simple_glyph(reader: FontReader, glyph_offset: int) -> GlyphData:
    """Read a simple glyph and insert its implied on-curve points."""
    reader.go_to(glyph_offset)
    contour_count = reader.read_int16()
    xmin, ymin, xmax, ymax = (reader.read_int16() for _ in range(4))
    ends = [reader.read_int16() for _ in range(max(contour_count, 0))]
    point_count = max([0, *(end + 1 for end in ends)])
    reader.skip(reader.read_uint16())

    flags = _read_flags(reader, point_count)
    points = [Point(0, 0) for _ in range(point_count)]
    points = read_coords(reader, True, flags, points)
    points = read_coords(reader, False, flags, points)
    coords, contours = add_implied_points(points, ends)
    return GlyphData(
        xmin=xmin,
        ymin=ymin,
        xmax=xmax,
        ymax=ymax,
        contour_indices=contours,
        coords=coords,
    )


def _read_flags(reader: FontReader, count: int) -> list[int]:
    flags: list[int] = []
    while len(flags) < count:
        flag = reader.read_byte()
        flags.append(flag)
        if bit_set(flag, _REPEAT):
            flags.extend([flag] * reader.read_byte())
    if len(flags) > count:
        raise FontFormatError("flag repeat runs past the last point")
    return flags


def read_compound_glyph(reader: FontReader, glyph_offset: int) -> CompoundData:
    """Read the component indices and offsets of a compound glyph."""
    reader.go_to(glyph_offset)
    reader.skip(10)
    data = CompoundData()
    more = True
    while more:
        flags = reader.read_uint16()
        glyph_index = reader.read_uint16()
        more = bit_set(flags, 5)
        if bit_set(flags, 0):
            arg1, arg2 = reader.read_int16(), reader.read_int16()
        else:
            arg1, arg2 = reader.read_byte(), reader.read_byte()
        data.glyph_indices.append(glyph_index)
        data.x_offsets.append(arg1)
        data.y_offsets.append(arg2)
    return data


def read_coords(
    reader: FontReader, read_x: bool, flags: list[int], points: list[Point]
) -> list[Point]:
    """Return ``points`` with their x (or y) coordinates decoded from deltas."""
    short_bit, same_bit = (1, 4) if read_x else (2, 5)
    coord = 0
    result = []
    for flag, point in zip(flags, points):
        if bit_set(flag, short_bit):
            delta = reader.read_byte()
            coord += delta if bit_set(flag, same_bit) else -delta
        elif not bit_set(flag, same_bit):
            coord += reader.read_int16()
        on_curve = point.on_curve or bit_set(flag, _ON_CURVE)
        if read_x:
            result.append(replace(point, x=coord, on_curve=on_curve))
        else:
            result.append(replace(point, y=coord, on_curve=on_curve))
    return result


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def add_implied_points(
    points: list[Point], contours: list[int]
) -> tuple[list[Point], list[int]]:
    """Insert a midpoint between consecutive points of equal curve state.

    Returns the new points and the new contour end indices.
    """
    new_points: list[Point] = []
    new_contours: list[int] = []
    start = 0
    for end in contours:
        ring = points[start : end + 1]
        for p1, p2 in zip(ring, ring[1:] + ring[:1]):
            new_points.append(p1)
            if p1.on_curve == p2.on_curve:
                new_points.append(
                    Point(_half(p1.x + p2.x), _half(p1.y + p2.y), True)
                )
        new_contours.append(len(new_points) - 1)
        start = end + 1
    return new_points, new_contours


def read_font_spacing(
    reader: FontReader, hmtx_offset: int, hhea_offset: int, glyphs: list[GlyphData]
) -> None:
    """Fill in the advance width of each glyph from the hmtx table."""
    reader.go_to(hhea_offset)
    reader.skip(34)
    metric_count = reader.read_uint16()
    reader.go_to(hmtx_offset)
    if not glyphs:
        return
    metric_count = min(metric_count, len(glyphs))
    for glyph in glyphs[:metric_count]:
        glyph.advance_width = reader.read_uint16()
        reader.skip(2)
    if metric_count == 0:
        return
    last_width = glyphs[metric_count - 1].advance_width
    for glyph in glyphs[metric_count:]:
        glyph.advance_width = last_width