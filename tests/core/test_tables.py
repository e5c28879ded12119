import pytest

from ziggurat.core import EXPONENTIAL_TABLES, GAUSSIAN_TABLES, ZigguratTables
from ziggurat.core.tables import exponential as exp_tables
from ziggurat.core.tables import gaussian as gauss_tables

TWO_POW_63 = 2.0**63
TWO_POW_64 = 1 << 64
INT64_MIN = -(1 << 63)


def unsigned(value: int) -> int:
    return value % TWO_POW_64


@pytest.mark.parametrize("tables", [EXPONENTIAL_TABLES, GAUSSIAN_TABLES])
def test_invariants_hold(tables):
    tables.check_invariants()


def test_layer_counts():
    assert EXPONENTIAL_TABLES.i_max == 252
    assert GAUSSIAN_TABLES.i_max == 253
    assert len(EXPONENTIAL_TABLES.x) == 253
    assert len(GAUSSIAN_TABLES.y) == 254


def test_last_entries_are_zero_width_and_pdf_at_zero():
    for tables in (EXPONENTIAL_TABLES, GAUSSIAN_TABLES):
        assert tables.x[-1] == 0.0
        # pdf(0) = 1 for both unnormalised densities
        assert tables.y[-1] * TWO_POW_63 == 1.0


def test_inflection_overhang_contains_one():
    j = gauss_tables.J_INFLECTION
    assert gauss_tables.X[j] * TWO_POW_63 < 1.0 < gauss_tables.X[j - 1] * TWO_POW_63


def test_tables_are_immutable():
    with pytest.raises(AttributeError):
        EXPONENTIAL_TABLES.i_max = 3
    assert isinstance(EXPONENTIAL_TABLES.x, tuple)
    assert isinstance(GAUSSIAN_TABLES.ipmf, tuple)


def test_check_invariants_rejects_bad_tables():
    bad = ZigguratTables(
        name="bad",
        i_max=2,
        x_0=1.0,
        x=(1.0 / TWO_POW_63, 2.0 / TWO_POW_63, 0.0),
        y=(0.1, 0.2, 0.3),
        alias_map=(0,) * 256,
        ipmf=(INT64_MIN,) * 256,
    )
    with pytest.raises(ValueError, match="non-increasing"):
        bad.check_invariants()


class TestSelectRegion:
    """Alias selection at and around the section thresholds."""

    @pytest.mark.parametrize("tables", [EXPONENTIAL_TABLES, GAUSSIAN_TABLES])
    def test_first_section_boundary(self, tables):
        threshold = tables.ipmf[0]
        # Thresholds keep their low 8 bits clear, so both draws select k=0.
        assert threshold & 0xFF == 0
        assert tables.select_region(unsigned(threshold)) == tables.alias_map[0]
        assert tables.select_region(unsigned(threshold - 256)) == 0

    def test_alias_used_at_threshold(self):
        tables = EXPONENTIAL_TABLES
        k = 2
        threshold = tables.ipmf[k]
        assert tables.alias_map[k] == 1
        assert tables.select_region(unsigned(threshold + k)) == 1
        assert tables.select_region(unsigned(threshold - 256 + k)) == k

    def test_negative_threshold_compares_signed(self):
        tables = GAUSSIAN_TABLES
        k = 204
        threshold = tables.ipmf[k]
        assert threshold < 0
        # Bit 63 set makes the draw negative when read as signed.
        assert tables.select_region((1 << 63) | k) == k
        assert tables.select_region(k) == tables.alias_map[k]

    @pytest.mark.parametrize("tables", [EXPONENTIAL_TABLES, GAUSSIAN_TABLES])
    def test_unused_sections_always_alias(self, tables):
        for k in range(tables.i_max + 1, 256):
            for draw in (k, (1 << 63) | k, TWO_POW_64 - 256 + k):
                assert tables.select_region(draw) == tables.alias_map[k]

    @pytest.mark.parametrize("tables", [EXPONENTIAL_TABLES, GAUSSIAN_TABLES])
    def test_every_section_selects_a_region(self, tables):
        for k in range(256):
            for high in (0, 1 << 62, 1 << 63, (1 << 64) - 256):
                region = tables.select_region(high | k)
                assert 0 <= region <= tables.i_max


def test_module_constants_match_table_set():
    assert exp_tables.EXPONENTIAL_TABLES.x is exp_tables.X
    assert gauss_tables.GAUSSIAN_TABLES.x_0 == gauss_tables.X_0
    assert gauss_tables.CONVEX_E_MAX < 0 < gauss_tables.CONCAVE_E_MAX
