"""
Test suite for configuration and logging

Tests environment-driven settings and the structured JSON log format.
"""

import json
import logging

import pytest
from decimal import Decimal

from digital_bank import config as config_module
from digital_bank.accounts import AccountNumberSequence, CheckingAccount, OperationStatus
from digital_bank.config import BankConfig, get_config, reload_config
from digital_bank.customers import Customer
from digital_bank.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestBankConfig:
    """Test BankConfig settings"""

    def test_defaults(self):
        settings = BankConfig()

        assert settings.bank_name == "Banco Digital"
        assert settings.branch_code == 1
        assert settings.currency == "BRL"
        assert settings.maintenance_fee == Decimal('12.50')
        assert settings.monthly_interest_rate == Decimal('0.004')
        assert settings.enforce_positive_withdrawals is False
        assert settings.log_level == "WARNING"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DIGITAL_BANK_BRANCH_CODE", "7")
        monkeypatch.setenv("DIGITAL_BANK_CHECKING_MAINTENANCE_FEE", "9.90")
        monkeypatch.setenv("DIGITAL_BANK_ENFORCE_POSITIVE_WITHDRAWALS", "true")

        settings = BankConfig()

        assert settings.branch_code == 7
        assert settings.maintenance_fee == Decimal('9.90')
        assert settings.enforce_positive_withdrawals is True

    def test_reload_config(self, monkeypatch):
        # Registers the current instance so teardown restores it
        monkeypatch.setattr(config_module, "config", get_config())
        monkeypatch.setenv("DIGITAL_BANK_BANK_NAME", "Banco Recarregado")

        reloaded = reload_config()

        assert reloaded.bank_name == "Banco Recarregado"
        assert get_config() is reloaded

    def test_accounts_read_global_config(self, monkeypatch):
        settings = BankConfig(branch_code=9, enforce_positive_withdrawals=True)
        monkeypatch.setattr(config_module, "config", settings)

        account = CheckingAccount(Customer("Ana", "1", "a@example.com"), AccountNumberSequence())

        assert account.branch_code == 9
        assert account.withdraw(0).status == OperationStatus.INVALID_AMOUNT


class TestLogging:
    """Test structured logging helpers"""

    def test_json_formatter(self):
        logger = logging.getLogger("digital_bank.test_formatter")
        record = logger.makeRecord(logger.name, logging.INFO, __file__, 1, "deposit done", (), None)
        record.action = "deposit"
        record.resource = "account:1"
        record.extra = {"amount": "10.00"}

        entry = json.loads(JSONFormatter().format(record))

        assert entry["level"] == "INFO"
        assert entry["message"] == "deposit done"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "account:1"
        assert entry["extra"] == {"amount": "10.00"}
        assert "timestamp" in entry

    def test_json_formatter_drops_missing_fields(self):
        record = logging.getLogger("x").makeRecord("x", logging.INFO, __file__, 1, "plain", (), None)
        entry = json.loads(JSONFormatter().format(record))
        assert "action" not in entry
        assert "extra" not in entry

    @pytest.mark.parametrize("log_format, formatter_class", [
        ("json", JSONFormatter),
        ("text", logging.Formatter),
    ])
    def test_setup_logging(self, log_format, formatter_class):
        logger = setup_logging("DEBUG", log_format, logger_name="digital_bank_test_setup")
        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert type(logger.handlers[0].formatter) is formatter_class
            assert logger.propagate is False

            # No duplicate handlers on repeated setup
            setup_logging("INFO", log_format, logger_name="digital_bank_test_setup")
            assert len(logger.handlers) == 1
        finally:
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)

    def test_log_action_attaches_fields(self, caplog):
        logger = get_logger("digital_bank.test_actions")
        with caplog.at_level(logging.INFO, logger="digital_bank.test_actions"):
            log_action(logger, "info", "opened", action="account_opened",
                       resource="account:5", extra={"branch_code": 1})

        record = caplog.records[-1]
        assert record.getMessage() == "opened"
        assert record.action == "account_opened"
        assert record.resource == "account:5"
        assert record.extra == {"branch_code": 1}

    def test_log_action_respects_level(self, caplog):
        logger = get_logger("digital_bank.test_quiet")
        with caplog.at_level(logging.WARNING, logger="digital_bank.test_quiet"):
            log_action(logger, "info", "hidden")
        assert not [r for r in caplog.records if r.name == "digital_bank.test_quiet"]
