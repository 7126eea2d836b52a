from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ApiResponse(_Model):
    Success: str | None = None
    Error: str | None = None
    success: str | None = None
    error: str | None = None

    @property
    def is_success(self) -> bool:
        return self.Success is not None or self.success is not None

    @property
    def message(self) -> str | None:
        return self.Success or self.success or self.Error or self.error

    @property
    def error_message(self) -> str | None:
        return self.Error or self.error


# users

class LoginResponse(_Model):
    id: str
    name: str
    lastName: str
    address: str
    accountType: str
    phoneNumber: str = Field(alias="Phone Number")

    @property
    def user_id(self) -> int:
        try:
            return int(self.id)
        except ValueError:
            return 0


class CreateUserRequest(_Model):
    name: str
    lastName: str
    address: str
    accountType: str
    phoneNumber: str
    username: str
    password: str
    confirmPassword: str


class CreateUserResponse(_Model):
    Success: str | None = None
    Error: str | None = None

    @property
    def is_success(self) -> bool:
        return self.Success is not None

    @property
    def message(self) -> str | None:
        return self.Success or self.Error


class UsernameExistsResponse(_Model):
    Exists: str | None = None
    Message: str | None = None
    Error: str | None = None

    @property
    def exists(self) -> bool:
        return self.Exists == "true"


# accounts

class CreateAccountRequest(_Model):
    routingNumber: int | None = None
    accountNumber: str | None = None
    amountAvail: float


class CreateAccountResponse(_Model):
    success: str | None = None
    error: str | None = None
    accountNumber: str | None = None
    routingNumber: str | None = None


class GetAccountResponse(_Model):
    hasAccount: bool = False
    accountNumber: str | None = None
    routingNumber: str | None = None
    balance: float | str | None = None
    Error: str | None = None

    @property
    def balance_float(self) -> float:
        if self.balance is None:
            return 0.0
        try:
            return float(self.balance)
        except ValueError:
            return 0.0


# transactions

class CreateTransactionRequest(_Model):
    description: str
    transAmount: int
    type: str
    status: str | None = None


class CreateTransactionResponse(_Model):
    success: str | None = None
    error: str | None = None


class TransferRequest(_Model):
    fromAccountNumber: str
    fromRoutingNumber: int
    toAccountNumber: str
    toRoutingNumber: int
    amount: int
    description: str | None = None


class TransferResponse(_Model):
    success: str | None = None
    error: str | None = None
    amount: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None


class TransactionHistoryResponse(_Model):
    Success: str | None = None
    Error: str | None = None
    info: str | None = None

    @property
    def is_success(self) -> bool:
        return self.Success == "True"
