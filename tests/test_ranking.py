"""Tests for device ranking."""

import pytest

from conftest import make_record
from src.ndevtop.models import METRICS, SortSpec
from src.ndevtop.ranking import RankingEngine


def names(records):
    return [r.name for r in records]


@pytest.fixture
def records():
    return [
        make_record('wlan0', rx_bytes=500, tx_bytes=1, rx_packets=7),
        make_record('eth0', rx_bytes=100, tx_bytes=1, rx_packets=7),
        make_record('lo', rx_bytes=500, tx_bytes=1, rx_packets=2),
        make_record('eth1', rx_bytes=900, tx_bytes=1, rx_packets=2),
    ]


class TestRankingEngine:
    """Test cases for RankingEngine."""

    @pytest.mark.unit
    def test_default_is_rx_bytes_descending(self, records):
        engine = RankingEngine()
        assert engine.spec == SortSpec(key='rx_bytes', ascending=False)
        assert names(engine.sort(records)) == ['eth1', 'wlan0', 'lo', 'eth0']

    @pytest.mark.unit
    def test_sort_by_name(self, records):
        engine = RankingEngine()
        engine.set_sort_order('name', True)
        assert names(engine.sort(records)) == ['eth0', 'eth1', 'lo', 'wlan0']

        engine.set_sort_order('name', False)
        assert names(engine.sort(records)) == ['wlan0', 'lo', 'eth1', 'eth0']

    @pytest.mark.unit
    def test_metric_ties_fall_back_to_name(self, records):
        engine = RankingEngine()
        engine.set_sort_order('rx_bytes', True)
        assert names(engine.sort(records)) == ['eth0', 'lo', 'wlan0', 'eth1']

    @pytest.mark.unit
    def test_all_tied_orders_by_name(self, records):
        engine = RankingEngine()
        engine.set_sort_order('tx_bytes', True)
        assert names(engine.sort(records)) == ['eth0', 'eth1', 'lo', 'wlan0']

    @pytest.mark.unit
    @pytest.mark.parametrize('key', ['name'] + METRICS)
    def test_descending_is_exact_reverse_of_ascending(self, records, key):
        """Reversal flips the name tie-break too."""
        engine = RankingEngine()
        engine.set_sort_order(key, True)
        ascending = names(engine.sort(records))
        engine.set_sort_order(key, False)
        descending = names(engine.sort(records))

        assert descending == list(reversed(ascending))

    @pytest.mark.unit
    def test_descending_ties_come_out_in_reverse_name_order(self, records):
        engine = RankingEngine()
        engine.set_sort_order('rx_packets', False)
        assert names(engine.sort(records)) == ['wlan0', 'eth0', 'lo', 'eth1']

    @pytest.mark.unit
    def test_unknown_key_is_ignored(self, records):
        engine = RankingEngine()
        engine.set_sort_order('tx_packets', True)

        engine.set_sort_order('rx_errors', False)

        assert engine.spec == SortSpec(key='tx_packets', ascending=True)

    @pytest.mark.unit
    def test_sort_does_not_modify_input(self, records):
        original = list(records)
        RankingEngine().sort(records)
        assert records == original

    @pytest.mark.unit
    def test_sort_empty(self):
        assert RankingEngine().sort([]) == []

    @pytest.mark.unit
    def test_given_spec_is_shared(self):
        spec = SortSpec(key='name', ascending=True)
        engine = RankingEngine(spec)

        engine.set_sort_order('tx_bytes', False)

        assert engine.spec is spec
        assert spec.key == 'tx_bytes'
