"""Unit tests for the scaling model."""

from types import SimpleNamespace

import pytest

from tpcdsgen.errors import InvalidOptionError
from tpcdsgen.generation.scaling import DEFINED_SCALES, Scaling, ScalingInfo, ScalingModel
from tpcdsgen.schema.table import Table


def test_static_tables_ignore_scale():
    for scale in (0.01, 1, 100, 100000):
        scaling = Scaling(scale)
        assert scaling.get_row_count(Table.DATE_DIM) == 73049
        assert scaling.get_row_count(Table.TIME_DIM) == 86400
        assert scaling.get_row_count(Table.INCOME_BAND) == 20


def test_defined_tiers_are_exact():
    """At a reference scale factor the tier's count is returned as is."""
    for index, scale in enumerate(DEFINED_SCALES):
        assert Scaling(scale).get_row_count(Table.WEB_SITE) == Table.WEB_SITE.scaling_info.row_counts[index]
        assert Scaling(scale).get_row_count(Table.STORE_SALES) == 240000 * scale


def test_linear_below_scale_one():
    assert Scaling(0.5).get_row_count(Table.STORE_SALES) == 120000


def test_logarithmic_interpolates_between_tiers():
    count = Scaling(30).get_row_count(Table.WAREHOUSE)
    assert 10 < count < 15


@pytest.mark.parametrize("table", list(Table))
def test_row_counts_are_monotone(table):
    scales = [0.01, 0.5, 1, 2, 10, 55, 100, 250, 300, 1000, 5000, 30000, 100000]
    counts = [Scaling(scale).get_row_count(table) for scale in scales]
    assert counts == sorted(counts)
    assert counts[0] >= 1


@pytest.mark.parametrize(
    "row_count,expected",
    [(6, 3), (7, 4), (8, 5), (9, 5), (10, 6), (11, 6), (12, 6), (30, 15)],
)
def test_id_count_of_history_tables(row_count, expected):
    """Three business ids per block of six rows plus the started ones."""
    table = SimpleNamespace(scaling_info=ScalingInfo.static(row_count), keeps_history=True)
    assert Scaling(1).get_id_count(table) == expected


def test_id_count_without_history():
    assert Scaling(1).get_id_count(Table.WAREHOUSE) == Scaling(1).get_row_count(Table.WAREHOUSE)


@pytest.mark.parametrize("scale", [0, -1, 100001])
def test_invalid_scale(scale):
    with pytest.raises(InvalidOptionError):
        Scaling(scale)


def test_scaling_info_rejects_decreasing_counts():
    with pytest.raises(ValueError):
        ScalingInfo(ScalingModel.LOGARITHMIC, (5, 4, 6, 7, 8, 9, 10, 11, 12))
