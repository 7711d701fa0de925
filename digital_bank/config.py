"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings


class BankConfig(BaseSettings):
    """Digital bank ledger configuration"""

    # Bank identity
    bank_name: str = "Banco Digital"
    branch_code: int = 1  # Single fixed branch for every account
    currency: str = "BRL"

    # Product rules (monetary values kept as strings, converted to Decimal)
    checking_maintenance_fee: str = "12.50"
    savings_monthly_interest_rate: str = "0.004"  # 0.4% per month

    # Reject withdrawals of zero or negative amounts, like deposits do
    enforce_positive_withdrawals: bool = False

    # Logging configuration
    log_level: str = "WARNING"  # INFO adds one record per account operation
    log_format: str = "json"  # json or text

    class Config:
        env_prefix = "DIGITAL_BANK_"
        env_file = ".env"
        case_sensitive = False

    @property
    def maintenance_fee(self) -> Decimal:
        return Decimal(self.checking_maintenance_fee)

    @property
    def monthly_interest_rate(self) -> Decimal:
        return Decimal(self.savings_monthly_interest_rate)


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
