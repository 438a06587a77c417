"""Tests for contract models: coercion, derived fields and export."""

import json
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from lease_tracker.schemas.domain import Contract, ContractForm, FileRef
from lease_tracker.services.export import export_contract_json, export_filename


class TestCoercion:
    def test_blank_and_invalid_numbers_become_zero(self):
        form = ContractForm.model_validate(
            {
                "monthlyAmount": "",
                "escalationFixedIncrement": None,
                "escalationMaxMonths": "twelve",
                "regimeAmount": "NaN",
            }
        )
        assert form.monthly_amount == 0
        assert form.escalation_fixed_increment == 0
        assert form.escalation_max_months == 0
        assert form.regime_amount == 0

    def test_numeric_strings_are_parsed(self):
        form = ContractForm.model_validate(
            {"monthlyAmount": " 1250.50 ", "escalationMaxMonths": "6", "durationMonths": "24"}
        )
        assert form.monthly_amount == 1250.5
        assert form.escalation_max_months == 6
        assert form.duration_months == 24

    def test_negative_amounts_become_zero(self):
        assert ContractForm(monthly_amount=-5).monthly_amount == 0

    @pytest.mark.parametrize("value", [None, "", "0", 0, -3, "abc"])
    def test_duration_defaults_to_twelve(self, value):
        assert ContractForm.model_validate({"durationMonths": value}).duration_months == 12

    def test_blank_dates_are_null(self):
        form = ContractForm.model_validate({"signatureDate": "", "avisoDate": "  "})
        assert form.signature_date is None
        assert form.aviso_date is None

    def test_unparseable_date_is_rejected(self):
        with pytest.raises(ValidationError):
            ContractForm.model_validate({"avisoDate": "31/12/2024"})

    def test_blank_id_means_new(self):
        assert ContractForm.model_validate({"id": ""}).id is None

    def test_null_name_becomes_empty(self):
        assert ContractForm.model_validate({"contractName": None}).contract_name == ""


class TestEndDate:
    def test_derived_from_signature_and_duration(self):
        contract = Contract(id="a", signature_date=date(2024, 3, 10), duration_months=18)
        assert contract.end_date == date(2025, 9, 10)

    def test_supplied_end_date_is_ignored(self):
        contract = Contract.model_validate(
            {"id": "a", "signatureDate": "2024-03-10", "durationMonths": 12, "endDate": "1999-01-01"}
        )
        assert contract.end_date == date(2025, 3, 10)

    def test_null_without_signature(self):
        contract = Contract.model_validate({"id": "a", "endDate": "2030-01-01"})
        assert contract.end_date is None

    def test_term_past_year_9999_is_rejected(self):
        with pytest.raises(ValidationError, match="outside the calendar"):
            ContractForm(signature_date=date(9999, 6, 1), duration_months=12)

    def test_term_ending_in_year_9999_is_accepted(self):
        contract = Contract(id="a", signature_date=date(9998, 12, 31), duration_months=12)
        assert contract.end_date == date(9999, 12, 31)


class TestExport:
    @pytest.fixture
    def contract(self):
        return Contract(
            id="1700000000000",
            contract_name="Local 4 - Av. Central",
            signature_date=date(2024, 1, 15),
            duration_months=24,
            aviso_date=date(2025, 10, 15),
            monthly_amount=1200.75,
            escalation_fixed_increment=25,
            escalation_max_months=12,
            regime_amount=1500,
            file_ref=FileRef(name="local4.pdf", size=12345, url="https://example.com/local4.pdf"),
            created_at=datetime(2024, 1, 16, 10, 0, tzinfo=timezone.utc),
        )

    def test_pretty_printed_camel_case(self, contract):
        text = export_contract_json(contract)
        assert text == json.dumps(contract.model_dump(mode="json", by_alias=True), indent=2)
        document = json.loads(text)
        assert document["contractName"] == "Local 4 - Av. Central"
        assert document["endDate"] == "2026-01-15"
        assert document["fileRef"]["name"] == "local4.pdf"
        assert "\n  " in text

    def test_round_trip(self, contract):
        assert Contract.model_validate(json.loads(export_contract_json(contract))) == contract

    def test_filename(self, contract):
        assert export_filename(contract) == "contract-1700000000000.json"
