import struct

import pytest

from egor.vertex import Color, Vertex


def test_packed_size_matches_stride():
    vert = Vertex.from_color((0.5, -0.5), Color.WHITE, (-1.0, -1.0))
    data = vert.to_bytes()
    assert len(data) == Vertex.STRIDE
    assert Vertex.STRIDE == 32


def test_from_color_copies_components():
    vert = Vertex.from_color((0.25, 0.75), Color(0.5, 0.25, 0.125, 0.75), (1.0, 0.0))
    assert vert.position == (0.25, 0.75)
    assert vert.color == (0.5, 0.25, 0.125, 0.75)
    assert vert.tex_coords == (1.0, 0.0)


def test_named_colours_expand_to_rgba():
    assert Vertex.from_color((0, 0), Color.RED, (0, 0)).color == (1.0, 0.0, 0.0, 1.0)
    assert Vertex.from_color((0, 0), Color.TRANSPARENT, (0, 0)).color == (0.0, 0.0, 0.0, 0.0)


def test_default_alpha_is_opaque():
    assert Color(0.2, 0.3, 0.4) == Color(0.2, 0.3, 0.4, 1.0)


def test_bytes_round_trip():
    vert = Vertex.from_color((-0.5, 0.5), Color.BLUE, (0.25, 0.5))
    values = struct.unpack("<8f", vert.to_bytes())
    assert values == (*vert.position, *vert.color, *vert.tex_coords)


def test_attributes_locate_fields_in_bytes():
    vert = Vertex.from_color((0.125, -0.375), Color(0.5, 0.25, 1.0, 0.5), (0.75, 0.5))
    data = vert.to_bytes()
    fields = (vert.position, vert.color, vert.tex_coords)
    for attr, expected in zip(Vertex.ATTRIBUTES, fields):
        got = struct.unpack_from(f"<{attr.components}f", data, attr.offset)
        assert got == expected


def test_attributes_cover_whole_stride():
    data = Vertex.from_color((0.0, 0.0), Color.WHITE, (0.0, 0.0)).to_bytes()
    last = Vertex.ATTRIBUTES[-1]
    assert last.offset + last.components * 4 == len(data)
    assert [a.shader_location for a in Vertex.ATTRIBUTES] == [0, 1, 2]


def test_vertex_is_immutable():
    vert = Vertex.from_color((0.0, 0.0), Color.BLACK, (0.0, 0.0))
    with pytest.raises(AttributeError):
        vert.position = (1.0, 1.0)
    assert vert.position == (0.0, 0.0)