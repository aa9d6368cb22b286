"""Tests for rate formatting and table building."""

import pytest

from conftest import make_record
from src.utils.table_formatters import (
    format_rate, formatted_table, header_cells, pick_tier, row_cells, table_header,
)


class TestFormatRate:
    """Test cases for format_rate."""

    @pytest.mark.unit
    def test_one_megabit(self):
        assert format_rate('rx_bytes', 125000, 1) == "1.0 Mbps"

    @pytest.mark.unit
    @pytest.mark.parametrize('delta, expected', [
        (0, "0.0  pps"),
        (999, "999.0  pps"),
        (1000, "1.0 Kpps"),
        (999999, "1000.0 Kpps"),
        (1000000, "1.0 Mpps"),
        (999999999, "1000.0 Mpps"),
        (1000000000, "1.0 Gpps"),
        (2500000000000, "2500.0 Gpps"),
    ])
    def test_packet_tier_boundaries(self, delta, expected):
        assert format_rate('tx_packets', delta, 1) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize('delta, expected', [
        (124, "992.0  bps"),
        (125, "1.0 Kbps"),
        (124999, "1000.0 Kbps"),
        (125000000, "1.0 Gbps"),
    ])
    def test_bytes_are_reported_in_bits(self, delta, expected):
        assert format_rate('tx_bytes', delta, 1) == expected

    @pytest.mark.unit
    def test_rate_is_divided_by_elapsed_seconds(self):
        assert format_rate('rx_packets', 3000, 3) == "1.0 Kpps"

    @pytest.mark.unit
    def test_tier_is_chosen_before_dividing_by_elapsed(self):
        # 1,000,000 bits over 3s is 333 kbit/s but stays in the M tier
        assert format_rate('rx_bytes', 125000, 3) == "0.3 Mbps"

    @pytest.mark.unit
    def test_elapsed_is_truncated_to_whole_seconds(self):
        assert format_rate('rx_packets', 100, 2.9) == "50.0  pps"

    @pytest.mark.unit
    def test_sub_second_elapsed_counts_as_one_second(self):
        assert format_rate('rx_packets', 100, 0.5) == "100.0  pps"

    @pytest.mark.unit
    def test_pick_tier(self):
        assert pick_tier(999) == (1, " ")
        assert pick_tier(1000) == (1000, "K")


class TestFormattedTable:
    """Test cases for formatted_table."""

    @pytest.mark.unit
    def test_header_only_when_empty(self):
        assert formatted_table([], "", 3) == [
            ["dev name", "RX bytes", "TX bytes", "RX packets", "TX packets"]
        ]

    @pytest.mark.unit
    def test_rows_follow_input_order(self):
        records = [
            make_record('wlan0', rx_bytes=125000, tx_bytes=0, rx_packets=10, tx_packets=1000),
            make_record('eth0'),
        ]

        table = formatted_table(records, "", 1)

        assert table[0] == table_header()
        assert table[1] == ["wlan0", "1.0 Mbps", "0.0  bps", "10.0  pps", "1.0 Kpps"]
        assert table[2][0] == "eth0"

    @pytest.mark.unit
    def test_filter_is_substring(self):
        records = [make_record('eth0'), make_record('veth123'), make_record('lo')]

        table = formatted_table(records, "eth", 1)

        assert [row[0] for row in table[1:]] == ['eth0', 'veth123']

    @pytest.mark.unit
    def test_filter_is_case_sensitive(self):
        table = formatted_table([make_record('eth0')], "ETH", 1)
        assert len(table) == 1

    @pytest.mark.unit
    def test_filter_matching_nothing_keeps_header(self):
        table = formatted_table([make_record('eth0')], "wlan", 1)
        assert len(table) == 1


class TestCells:
    """Test cases for the table cell helpers."""

    @pytest.mark.unit
    def test_header_cells_are_bold(self):
        cells = header_cells(table_header())
        assert all(cell.style == "bold" for cell in cells)
        assert cells[0].justify == "left"
        assert cells[1].justify == "right"

    @pytest.mark.unit
    def test_row_cells_are_padded(self):
        cells = row_cells(["eth0", "1.0 Mbps"])
        assert cells[0].plain == "eth0" + " " * 11
        assert cells[1].plain == "   1.0 Mbps"
        assert cells[1].justify == "right"
