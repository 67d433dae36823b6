"""Tests for nearest_colour.core.palette — palette building and built-in tables."""

import numpy as np
import pytest
from nearest_colour.core.palette import (
    BASH_COLOURS,
    BASH_MAP,
    STANDARD_COLOURS,
    build_palette,
    make_spec,
    parse_palette_arg,
)
from nearest_colour.core.parser import parse_colour
from nearest_colour.core.types import RGB, ColourSpec, InvalidColourFormat


class TestBuildPalette:
    def test_list_unnamed(self):
        palette = build_palette(['#eee', '#444'])
        assert palette == (
            ColourSpec(source='#eee', rgb=RGB(238, 238, 238)),
            ColourSpec(source='#444', rgb=RGB(68, 68, 68)),
        )
        assert all(spec.name is None for spec in palette)

    def test_mapping_named_in_order(self):
        palette = build_palette({'maroon': '#800', 'white': 'fff', 'aqua': 'aqua'})
        assert [spec.name for spec in palette] == ['maroon', 'white', 'aqua']
        assert [spec.source for spec in palette] == ['#800', 'fff', 'aqua']
        assert palette[2].rgb == RGB(0, 255, 255)

    def test_structured_gets_hex_source(self):
        palette = build_palette({'light yellow': {'r': 255, 'g': 255, 'b': 51}})
        assert palette[0].source == '#ffff33'
        assert palette[0].rgb == RGB(255, 255, 51)

    def test_tuple_source(self):
        palette = build_palette(((1, 2, 3), '#fff'))
        assert palette[0].source == '#010203'

    def test_existing_specs_kept(self):
        maroon = make_spec('#800', 'maroon')
        palette = build_palette([maroon, '#fff'])
        assert palette[0] is maroon
        assert palette[1].name is None

    def test_empty_name_is_unnamed(self):
        assert build_palette({'': '#fff'})[0].name is None

    def test_duplicates_allowed(self):
        assert len(build_palette(['#000', '#000', '#000'])) == 3

    def test_empty(self):
        assert build_palette([]) == ()

    def test_invalid_colour_aborts(self):
        with pytest.raises(InvalidColourFormat):
            build_palette({'ok': '#fff', 'invalid': 'foo'})

    def test_string_source_rejected(self):
        with pytest.raises(TypeError):
            build_palette('#fff')

    def test_other_type_rejected(self):
        with pytest.raises(TypeError):
            build_palette(42)

    def test_returns_tuple(self):
        assert isinstance(build_palette(['#fff']), tuple)


class TestMakeSpec:
    def test_string(self):
        assert make_spec('#800', 'maroon') == ColourSpec(source='#800', rgb=RGB(136, 0, 0), name='maroon')

    def test_rgb(self):
        assert make_spec(RGB(255, 0, 0)) == ColourSpec(source='#ff0000', rgb=RGB(255, 0, 0))

    @pytest.mark.parametrize('rgb', [RGB(300, 0, 0), RGB(-5, 0, 0), RGB(1.5, 0, 0), {'r': 0, 'g': 0, 'b': 256}])
    def test_structured_out_of_range_or_float_rejected(self, rgb):
        with pytest.raises(InvalidColourFormat):
            make_spec(rgb)

    def test_structured_source_parses_back(self):
        for rgb in [RGB(0, 0, 0), RGB(255, 255, 255), (4, 251, 200), {'r': 17, 'g': 34, 'b': 51}]:
            spec = make_spec(rgb)
            assert parse_colour(spec.source) == spec.rgb

    def test_numpy_ints_become_ints(self):
        spec = make_spec(tuple(np.array([1, 2, 3], dtype=np.uint8)))
        assert spec == ColourSpec(source='#010203', rgb=RGB(1, 2, 3))
        assert all(type(c) is int for c in spec.rgb)

    def test_out_of_range_string_entry_kept(self):
        # strings keep their own source, which parses to rgb by construction
        spec = make_spec('rgb(300, 0, 0)')
        assert spec.rgb == RGB(300, 0, 0)
        assert parse_colour(spec.source) == spec.rgb

    def test_frozen(self):
        spec = make_spec('#800')
        with pytest.raises(AttributeError):
            spec.name = 'maroon'


class TestParsePaletteArg:
    def test_unnamed(self):
        assert parse_palette_arg('#eee,#444') == ['#eee', '#444']

    def test_named(self):
        result = parse_palette_arg('maroon=#800, white = fff')
        assert result == [make_spec('#800', 'maroon'), make_spec('fff', 'white')]

    def test_mixed(self):
        palette = build_palette(parse_palette_arg('maroon=#800,#eee'))
        assert [spec.name for spec in palette] == ['maroon', None]

    def test_rgb_commas_not_split(self):
        assert parse_palette_arg('rgb(1, 2, 3),#fff') == ['rgb(1, 2, 3)', '#fff']

    def test_named_rgb(self):
        result = parse_palette_arg('dim=rgb(10%, 10%, 10%)')
        assert result[0].rgb == RGB(26, 26, 26)

    def test_empty(self):
        with pytest.raises(ValueError):
            parse_palette_arg('')
        with pytest.raises(ValueError):
            parse_palette_arg(' , ')

    def test_invalid_named_colour(self):
        with pytest.raises(InvalidColourFormat):
            parse_palette_arg('bad=nope')


class TestStandardColours:
    def test_has_17(self):
        assert len(STANDARD_COLOURS) == 17

    def test_values_parse(self):
        for name in STANDARD_COLOURS:
            assert len(build_palette([name])) == 1

    def test_read_only(self):
        with pytest.raises(TypeError):
            STANDARD_COLOURS['pink'] = '#ffc0cb'


class TestBashColours:
    def test_size(self):
        assert len(BASH_COLOURS) == 256

    def test_unnamed(self):
        assert all(spec.name is None for spec in BASH_COLOURS)

    def test_values_are_hex(self):
        for spec in BASH_COLOURS:
            assert spec.source.startswith('#'), spec.source
            assert len(spec.source) == 7, spec.source

    def test_first_and_last(self):
        assert BASH_COLOURS[1].source == '#c91b00'
        assert BASH_COLOURS[255].rgb == RGB(238, 238, 238)

    def test_map_indexes(self):
        assert BASH_MAP['#c91b00'] == 1
        assert BASH_MAP['#eeeeee'] == 255

    def test_map_duplicates_last_wins(self):
        assert BASH_MAP['#000000'] == 16
        assert BASH_MAP['#ffffff'] == 231
        assert BASH_MAP['#5ffdff'] == 87

    def test_map_read_only(self):
        with pytest.raises(TypeError):
            BASH_MAP['#123456'] = 0
