import argparse
import logging
import sys

from . import __version__
from .config import Settings, load_settings
from .ledger.models import TX_FILTERS
from .logging_setup import setup_logging


def mask(value: str | None, show: int = 4) -> str:
    if not value:
        return "None"
    if len(value) <= show:
        return "*" * len(value)
    return value[:show] + "*" * (len(value) - show)


def _read_blob(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _user_id(args: argparse.Namespace, settings: Settings) -> int:
    user_id = args.user_id if args.user_id is not None else settings.default_user_id
    if user_id is None:
        raise SystemExit("--user-id is required (or set PAYMENT_USER_ID)")
    return user_id


def main() -> int:
    parser = argparse.ArgumentParser(prog="payment-system")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "command",
        nargs="?",
        default="health",
        choices=["health", "status-env", "parse", "history", "account", "transfer"],
        help="Command to run",
    )

    parser.add_argument("--user-id", type=int, default=None, help="Backend user id (history / account)")
    parser.add_argument(
        "--filter",
        choices=list(TX_FILTERS),
        default="all",
        help="Transaction filter (parse / history). Default: all",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Raw transaction feed to parse offline (used with parse). Reads stdin if omitted.",
    )

    parser.add_argument("--from-account", type=str, default=None)
    parser.add_argument("--from-routing", type=int, default=None)
    parser.add_argument("--to-account", type=str, default=None)
    parser.add_argument("--to-routing", type=int, default=None)
    parser.add_argument("--amount", type=int, default=None, help="Whole dollars (transfer)")
    parser.add_argument("--description", type=str, default=None)

    args = parser.parse_args()

    if args.version:
        print(__version__)
        return 0

    if args.command == "parse":
        # offline, no backend settings needed
        setup_logging(Settings().log_level)
        from .ledger import compute_summary, parse_transactions
        from .render import history_block, summary_block

        try:
            blob = _read_blob(args.file)
        except OSError as e:
            print("error =", e)
            return 1

        records = parse_transactions(blob)
        print(history_block(records, args.filter))
        print()
        print(summary_block(compute_summary(records)))
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    if args.command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    if args.command == "status-env":
        print("PAYMENT_API_BASE_URL =", mask(settings.api_base_url, show=12))
        print("PAYMENT_API_TIMEOUT =", settings.api_timeout_seconds)
        print("PAYMENT_API_MAX_ATTEMPTS =", settings.api_max_attempts)
        user_id = settings.default_user_id
        print("PAYMENT_USER_ID =", mask(str(user_id) if user_id is not None else None, show=1))
        print("LOG_LEVEL =", settings.log_level)
        return 0

    from .api import PaymentApiClient
    from .render import format_currency, history_block, summary_block
    from .state import AccountController, TransactionController

    client = PaymentApiClient.from_settings(settings)
    try:
        if args.command == "account":
            accounts = AccountController(client)
            state = accounts.refresh(_user_id(args, settings))
            if not state.has_account:
                print("has_account = False")
                return 0
            print("has_account = True")
            if state.account is not None:
                print("account_number =", mask(state.account.account_number))
                print("routing_number =", state.account.routing_number)
                print("balance =", format_currency(state.account.amount_avail))
            return 0

        if args.command == "history":
            user_id = _user_id(args, settings)
            accounts = AccountController(client)
            accounts.refresh(user_id)

            txs = TransactionController(client, accounts=accounts)
            state = txs.refresh(user_id)
            if state.error_message:
                print("error =", state.error_message)
                return 1

            print(history_block(txs.get_transactions(), args.filter))
            print()
            print(summary_block(txs.get_summary()))
            return 0

        if args.command == "transfer":
            required = {
                "--from-account": args.from_account,
                "--from-routing": args.from_routing,
                "--to-account": args.to_account,
                "--to-routing": args.to_routing,
                "--amount": args.amount,
            }
            missing = [k for k, v in required.items() if v is None]
            if missing:
                raise SystemExit("Missing arguments for transfer: " + ", ".join(missing))

            txs = TransactionController(client)
            state = txs.make_transfer(
                from_account_number=args.from_account,
                from_routing_number=args.from_routing,
                to_account_number=args.to_account,
                to_routing_number=args.to_routing,
                amount=args.amount,
                description=args.description,
            )
            if state.error_message:
                print("error =", state.error_message)
                return 1
            print("ok =", state.success_message or "Transfer submitted")
            return 0
    finally:
        client.close()

    return 1
