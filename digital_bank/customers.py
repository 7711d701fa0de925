"""
Customer Module

Customer identity record. Accounts hold a shared reference to their owner;
customers carry no back-reference to their accounts.
"""

from dataclasses import dataclass, field
import uuid


@dataclass(eq=False)
class Customer:
    """
    Customer identity: name, tax id (CPF) and email.

    No format validation is applied to any field. Equality is identity;
    customer_id is the stable key used to deduplicate owners.
    """
    name: str
    tax_id: str
    email: str
    customer_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r}, tax_id={self.tax_id!r}, customer_id={self.customer_id!r})"
