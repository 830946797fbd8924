"""Unit tests for page payload models."""

from __future__ import annotations

import json

import pytest

from resultpages.core.pages.models import ComparisonTable, TableColumn
from resultpages.domains.health.domain_logic.assembler import assemble


class TestComparisonTable:
    def test_create_freezes_rows(self):
        source_row = {"ageGroup": "18-29"}
        table = ComparisonTable.create(
            title="t",
            description="d",
            columns=[TableColumn("ageGroup", "Age Group")],
            rows=[source_row],
        )
        source_row["ageGroup"] = "changed"

        assert table.rows[0]["ageGroup"] == "18-29"
        with pytest.raises(TypeError):
            table.rows[0]["ageGroup"] = "x"  # type: ignore[index]


class TestPagePayloadToDict:
    def test_camel_case_and_json_ready(self, reference):
        page = assemble("bmi", "68-170-male", reference)
        data = page.to_dict()

        assert data["canonicalPath"] == "/bmi/results/68-170-male"
        assert data["metadataTitle"].endswith("| HealthCheck")
        assert data["ogImage"] == "/images/calculators/bmi-calculator.jpg"
        assert data["comparisonColumns"][1] == {
            "key": "averageBmi",
            "label": "Avg BMI",
            "align": "right",
        }
        # Last breadcrumb is the current page and has no link.
        assert data["breadcrumbs"][0] == {"label": "Home", "href": "/"}
        assert "href" not in data["breadcrumbs"][-1]
        json.dumps(data)

    def test_payload_is_frozen(self, reference):
        page = assemble("macro", "2200-calories-maintenance-balanced", reference)
        with pytest.raises(AttributeError):
            page.slug = "other"  # type: ignore[misc]
