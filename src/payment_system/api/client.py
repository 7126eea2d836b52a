from __future__ import annotations

import logging
import random
import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .. import __version__
from .errors import ApiError
from .models import (
    ApiResponse,
    CreateAccountRequest,
    CreateAccountResponse,
    CreateTransactionRequest,
    CreateTransactionResponse,
    CreateUserRequest,
    CreateUserResponse,
    GetAccountResponse,
    LoginResponse,
    TransactionHistoryResponse,
    TransferRequest,
    TransferResponse,
    UsernameExistsResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sleep_seconds(attempt: int) -> float:
    base = min(10.0, 0.5 * (2**attempt))
    return base + random.random() * 0.3


class PaymentApiClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 20.0,
        max_attempts: int = 1,
        transport: httpx.BaseTransport | None = None,
    ):
        if not base_url.startswith(("http://", "https://")):
            raise ApiError("invalid_url", detail=base_url)

        self._base_url = base_url.rstrip("/")
        self._max_attempts = max(1, int(max_attempts))

        self._client = httpx.Client(
            base_url=self._base_url,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": f"payment-system-client/{__version__}",
            },
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings) -> "PaymentApiClient":
        return cls(
            base_url=settings.api_base_url,
            timeout_seconds=settings.api_timeout_seconds,
            max_attempts=settings.api_max_attempts,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PaymentApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        text_body: str | None = None,
    ) -> object:
        last_err: Exception | None = None

        for attempt in range(self._max_attempts):
            try:
                if text_body is not None:
                    resp = self._client.request(method, path, content=text_body.encode("utf-8"))
                else:
                    resp = self._client.request(method, path, json=json_body)
            except (httpx.TimeoutException, httpx.NetworkError) as e:
                last_err = e
                logger.debug("%s %s attempt %s failed: %s", method, path, attempt + 1, e)
                if attempt + 1 < self._max_attempts:
                    time.sleep(_sleep_seconds(attempt))
                continue

            if resp.status_code == 401:
                raise ApiError("unauthorized", detail=f"{method} {path}: 401 {resp.text}")

            if not resp.is_success:
                raise ApiError(
                    "request_failed",
                    detail=f"{method} {path}: {resp.status_code} {resp.reason_phrase}. Response: {resp.text}",
                )

            try:
                return resp.json()
            except ValueError as e:
                raise ApiError("decoding_failed", detail=f"{method} {path}: {e}. Response: {resp.text}") from e

        raise ApiError(
            "request_failed",
            detail=f"{method} {path} failed after {self._max_attempts} attempt(s). Last error: {last_err}",
        )

    def _call(
        self,
        model: type[M],
        method: str,
        path: str,
        *,
        json_body: Any = None,
        text_body: str | None = None,
    ) -> M:
        data = self._request_json(method, path, json_body=json_body, text_body=text_body)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiError("decoding_failed", detail=f"{method} {path}: {e}") from e

    @staticmethod
    def _dump(req: BaseModel) -> dict[str, Any]:
        return req.model_dump(by_alias=True, exclude_none=True)

    # users

    def login(self, username: str) -> LoginResponse:
        return self._call(LoginResponse, "POST", "/get-data-byUsername", text_body=username)

    def create_user(self, req: CreateUserRequest) -> CreateUserResponse:
        return self._call(CreateUserResponse, "POST", "/createUser", json_body=self._dump(req))

    def check_username_exists(self, username: str) -> UsernameExistsResponse:
        return self._call(UsernameExistsResponse, "POST", "/user-data-exist", text_body=username)

    def delete_user(self, username: str) -> ApiResponse:
        return self._call(ApiResponse, "POST", "/delete-data-byUsername", text_body=username)

    # accounts

    def initialize_database(self) -> ApiResponse:
        return self._call(ApiResponse, "GET", "/db-init")

    def create_account(self, user_id: int, req: CreateAccountRequest) -> CreateAccountResponse:
        return self._call(CreateAccountResponse, "POST", f"/createAccount/{user_id}", json_body=self._dump(req))

    def get_account(self, user_id: int) -> GetAccountResponse:
        return self._call(GetAccountResponse, "GET", f"/getAccount/{user_id}")

    # transactions

    def initialize_transaction_table(self) -> ApiResponse:
        return self._call(ApiResponse, "GET", "/transaction/init")

    def create_transaction(self, account_id: int, req: CreateTransactionRequest) -> CreateTransactionResponse:
        return self._call(
            CreateTransactionResponse,
            "POST",
            f"/transaction/create/{account_id}",
            json_body=self._dump(req),
        )

    def make_transfer(self, req: TransferRequest) -> TransferResponse:
        return self._call(TransferResponse, "POST", "/transaction/transfer", json_body=self._dump(req))

    def get_transaction_history(self, user_id: int) -> TransactionHistoryResponse:
        return self._call(
            TransactionHistoryResponse,
            "POST",
            "/user-transaction",
            json_body={"userID": user_id},
        )
