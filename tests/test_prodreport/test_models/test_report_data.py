"""
Tests for report_data module.
"""

import pytest
from pydantic import ValidationError

from prodreport.models.report_data import NO_DATA_MESSAGE, MatchedRow


class TestMatchedRow:
    """Tests for MatchedRow."""

    def test_unmatched_row_defaults(self):
        row = MatchedRow(product_label="Flange A", on_time="09:00", quantity=3)
        assert row.off_time == ""
        assert row.total_time_minutes == ""

    def test_total_time_accepts_minutes_or_empty(self):
        assert MatchedRow(product_label="A", total_time_minutes=12).total_time_minutes == 12
        with pytest.raises(ValidationError):
            MatchedRow(product_label="A", total_time_minutes="twelve")

    def test_placeholder(self):
        row = MatchedRow.placeholder()
        assert row.product_label == NO_DATA_MESSAGE
        assert row.quantity is None

    def test_serialization_uses_aliases(self):
        data = MatchedRow.model_validate(
            MatchedRow.model_config["json_schema_extra"]["examples"][0]
        ).model_dump()
        assert data["productLabel"] == "Flange A"
        assert data["totalTime"] == 30
