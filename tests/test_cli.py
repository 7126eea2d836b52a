import io
import sys

import payment_system.api as api_pkg
from payment_system import cli
from payment_system.api.errors import ApiError
from payment_system.api.models import GetAccountResponse, TransactionHistoryResponse, TransferResponse
from payment_system.config import load_settings

FEED = (
    "Transaction: Amount: $50, Date: 2025-01-02, Type: DEBIT, Status: PENDING, Description: Coffee, Account: 999\n"
    "Transaction: Amount: $500, Date: 2025-01-03, Type: CREDIT, Status: COMPLETE, Description: Salary, Account: 999"
)


def test_parse_command_reads_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    feed = tmp_path / "feed.txt"
    feed.write_text(FEED, encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["payment-system", "parse", "--file", str(feed), "--filter", "pending"])

    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "Coffee" in out
    assert "Salary" not in out
    assert "Income: +$500.00" in out
    assert "Expenses: -$50.00" in out


def test_parse_command_reads_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("No transaction data found for the given user ID."))
    monkeypatch.setattr(sys, "argv", ["payment-system", "parse"])

    assert cli.main() == 0

    out = capsys.readouterr().out
    assert "No transactions found" in out
    assert "Total Balance: $0.00" in out


def test_mask():
    assert cli.mask(None) == "None"
    assert cli.mask("123") == "***"
    assert cli.mask("123456") == "1234**"


class FakeClient:
    history_error: str | None = None
    transfer_error: str | None = None

    @classmethod
    def from_settings(cls, settings):
        return cls()

    def get_account(self, user_id: int):
        return GetAccountResponse(hasAccount=True, accountNumber="123456789", routingNumber="21", balance=800.0)

    def get_transaction_history(self, user_id: int):
        if self.history_error:
            raise ApiError("request_failed", detail=self.history_error)
        return TransactionHistoryResponse(Success="True", info=FEED)

    def make_transfer(self, req):
        if self.transfer_error:
            return TransferResponse(error=self.transfer_error)
        return TransferResponse(success="Transfer completed")

    def close(self) -> None:
        pass


def _backend_env(tmp_path, monkeypatch, fake=FakeClient):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PAYMENT_API_BASE_URL", "http://bank.test")
    monkeypatch.setenv("PAYMENT_USER_ID", "7")
    monkeypatch.setattr(api_pkg, "PaymentApiClient", fake)
    load_settings.cache_clear()


def test_history_command(tmp_path, monkeypatch, capsys):
    _backend_env(tmp_path, monkeypatch)
    monkeypatch.setattr(sys, "argv", ["payment-system", "history", "--filter", "debit"])

    assert cli.main() == 0
    load_settings.cache_clear()

    out = capsys.readouterr().out
    assert "Coffee" in out
    assert "Total Balance: $800.00" in out


def test_history_command_transport_failure(tmp_path, monkeypatch, capsys):
    class Failing(FakeClient):
        history_error = "connection refused"

    _backend_env(tmp_path, monkeypatch, Failing)
    monkeypatch.setattr(sys, "argv", ["payment-system", "history", "--user-id", "1"])

    assert cli.main() == 1
    load_settings.cache_clear()

    assert "error = Request failed. Please try again." in capsys.readouterr().out


def test_account_command_masks_number(tmp_path, monkeypatch, capsys):
    _backend_env(tmp_path, monkeypatch)
    monkeypatch.setattr(sys, "argv", ["payment-system", "account"])

    assert cli.main() == 0
    load_settings.cache_clear()

    out = capsys.readouterr().out
    assert "account_number = 1234*****" in out
    assert "balance = $800.00" in out


def test_transfer_command(tmp_path, monkeypatch, capsys):
    args = [
        "payment-system",
        "transfer",
        "--from-account", "111",
        "--from-routing", "1",
        "--to-account", "222",
        "--to-routing", "2",
        "--amount", "50",
    ]
    _backend_env(tmp_path, monkeypatch)
    monkeypatch.setattr(sys, "argv", args)
    assert cli.main() == 0
    assert "ok = Transfer completed" in capsys.readouterr().out

    class Rejected(FakeClient):
        transfer_error = "Insufficient funds"

    monkeypatch.setattr(api_pkg, "PaymentApiClient", Rejected)
    assert cli.main() == 1
    load_settings.cache_clear()
    assert "error = Insufficient funds" in capsys.readouterr().out


def test_status_env_is_masked(tmp_path, monkeypatch, capsys):
    _backend_env(tmp_path, monkeypatch)
    monkeypatch.setenv("PAYMENT_API_BASE_URL", "http://bank.test/secret-path")
    monkeypatch.setenv("PAYMENT_USER_ID", "4242")
    load_settings.cache_clear()
    monkeypatch.setattr(sys, "argv", ["payment-system", "status-env"])

    assert cli.main() == 0
    load_settings.cache_clear()

    out = capsys.readouterr().out
    assert "secret-path" not in out
    assert "PAYMENT_USER_ID = 4***" in out


def test_parse_command_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["payment-system", "parse", "--file", str(tmp_path / "missing.txt")])

    assert cli.main() == 1
    assert "error =" in capsys.readouterr().out
