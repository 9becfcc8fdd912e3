"""Tests for the sample report."""

import logging
from decimal import Decimal

from src.main import build_report, build_sample_orders, main


class TestSampleReport:
    """Tests for the sample orders and their report."""

    def test_sample_orders(self):
        """Should build the three sample orders."""
        orders = build_sample_orders()
        assert [order.order_id for order in orders] == [1001, 1002, 1003]
        assert [order.calculate_final_price() for order in orders] == [
            Decimal("728.06"), Decimal("1268.97"), Decimal("566.08"),
        ]

    def test_report_sections(self):
        """Should include final prices, top spender and popularity."""
        lines = build_report(build_sample_orders())
        assert "  Order #1002: $1,268.97" in lines
        top_spender_index = lines.index("=== Top Spender ===")
        assert lines[top_spender_index + 1] == "  pers2"
        popularity_index = lines.index("=== Product Popularity ===")
        assert lines[popularity_index + 1:] == [
            f"  {'Keyboard':<20} x5 sold",
            f"  {'Mouse':<20} x5 sold",
            f"  {'Monitor':<20} x2 sold",
            f"  {'Laptop':<20} x1 sold",
        ]

    def test_main_prints_report_to_stdout(self, capsys):
        """Should print the report to stdout."""
        main()
        captured = capsys.readouterr()
        assert "=== Top Spender ===" in captured.out
        assert "  pers2" in captured.out.splitlines()
        assert "=== Top Spender ===" not in captured.err

    def test_main_logs_diagnostics(self, caplog):
        """Should log progress without logging the report itself."""
        with caplog.at_level(logging.INFO, logger="src.main"):
            main()
        assert "Building report for 3 orders" in caplog.text
        assert "=== Top Spender ===" not in caplog.text
