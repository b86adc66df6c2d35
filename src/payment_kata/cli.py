"""
CLI entry point for the payment kata.

Usage:
    # Charge a card through the refactored processor:
    payment-kata pay --type credit_card --amount 100 --email a@example.com \\
        --detail card_number=4242424242424242 --detail cvv=123 --detail expiry=12/25

    # Same request through the legacy exhibit:
    payment-kata pay --legacy --type paypal --amount 50 --email a@example.com \\
        --detail paypal_email=a@paypal.com

    # Fee and tier discount for an amount:
    payment-kata quote --amount 100 --tier gold

    # The two sample payments, either rendition:
    payment-kata demo [--legacy]

    # Print or apply the interview rubric:
    payment-kata rubric --score abstraction=18 --score dispatch=15
"""

import argparse
import logging
import sys

from payment_kata.config import get_settings
from payment_kata.domain import rubric
from payment_kata.domain.models import PaymentRequest
from payment_kata.errors import PaymentValidationError
from payment_kata.legacy import LegacyPaymentProcessor
from payment_kata.logging_config import configure_logging
from payment_kata.services.factory import ServiceFactory
from payment_kata.services.gateway import SimulatedGateway

logger = logging.getLogger(__name__)

# Exit status for requests rejected by validation.
EXIT_INVALID = 2

DEMO_PAYMENTS: list[PaymentRequest] = [
    PaymentRequest(
        payment_type="credit_card",
        amount=100.00,
        currency="USD",
        customer_email="customer@example.com",
        details={"card_number": "4242424242424242", "cvv": "123", "expiry": "12/25"},
    ),
    PaymentRequest(
        payment_type="paypal",
        amount=50.00,
        currency="USD",
        customer_email="customer@example.com",
        details={"paypal_email": "customer@paypal.com"},
    ),
]


def parse_pairs(pairs: list[str], parser: argparse.ArgumentParser, option: str) -> dict[str, str]:
    """Turn ``["k=v", ...]`` into a dict, failing through the parser on bad input."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            parser.error(f"{option} expects KEY=VALUE, got {pair!r}")
        parsed[key] = value
    return parsed


def run_pay(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    details = parse_pairs(args.detail, parser, "--detail")
    if args.legacy:
        LegacyPaymentProcessor().process_payment(args.type, args.amount, args.currency, args.email, details)
        return 0

    request = PaymentRequest(
        payment_type=args.type,
        amount=args.amount,
        currency=args.currency,
        customer_email=args.email,
        details=details,
    )
    gateway = SimulatedGateway(status="declined") if args.decline else None
    try:
        result = ServiceFactory.get_processor(gateway=gateway).process_payment(request)
    except PaymentValidationError as exc:
        logger.error("Payment rejected: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    print(result.model_dump_json(indent=2))
    return 0 if result.succeeded else 1


def run_quote(args: argparse.Namespace) -> int:
    processor = ServiceFactory.get_processor()
    fee = processor.calculate_fees(args.amount)
    discounted = processor.apply_discount(args.amount, args.tier)
    print(f"fee: {fee:.2f}")
    print(f"discounted ({args.tier or 'none'}): {discounted:.2f}")
    return 0


def run_demo(args: argparse.Namespace) -> int:
    if args.legacy:
        legacy = LegacyPaymentProcessor()
        for req in DEMO_PAYMENTS:
            legacy.process_payment(req.payment_type, req.amount, req.currency, req.customer_email, req.details)
        return 0

    processor = ServiceFactory.get_processor()
    for req in DEMO_PAYMENTS:
        print(processor.process_payment(req).model_dump_json(indent=2))
    logger.info("Processed transactions: %s", processor.get_processed_transactions())
    return 0


def run_rubric(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if not args.score:
        for criterion in rubric.CRITERIA:
            print(f"{criterion.key:<12} {criterion.max_points:>3}  {criterion.title}: {criterion.anti_pattern}")
        return 0

    awarded: dict[str, int] = {}
    for key, value in parse_pairs(args.score, parser, "--score").items():
        try:
            awarded[key] = int(value)
        except ValueError:
            parser.error(f"--score {key} expects an integer, got {value!r}")
    try:
        result = rubric.score(awarded)
    except ValueError as exc:
        parser.error(str(exc))
    print(result.model_dump_json(indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="payment-kata", description="Payment processing refactoring kata")
    parser.add_argument("--log-level", default=None, help="Override PAYMENT_KATA_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    pay = sub.add_parser("pay", help="Process one payment")
    pay.add_argument("--type", required=True, help="credit_card, paypal or bank_transfer")
    pay.add_argument("--amount", required=True, type=float, help="Payment amount")
    pay.add_argument("--currency", default="USD", help="Currency code")
    pay.add_argument("--email", required=True, help="Customer email")
    pay.add_argument("--detail", action="append", default=[], metavar="KEY=VALUE", help="Method-specific field")
    pay.add_argument("--legacy", action="store_true", help="Run the legacy exhibit instead")
    pay.add_argument("--decline", action="store_true", help="Make the simulated gateway decline")

    quote = sub.add_parser("quote", help="Show the fee and tier discount for an amount")
    quote.add_argument("--amount", required=True, type=float)
    quote.add_argument("--tier", default="", help="gold, silver or bronze")

    demo = sub.add_parser("demo", help="Run the sample payments")
    demo.add_argument("--legacy", action="store_true", help="Run the legacy exhibit instead")

    score = sub.add_parser("rubric", help="Print the interview rubric or score a candidate")
    score.add_argument("--score", action="append", default=[], metavar="CRITERION=POINTS")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    if args.command == "pay":
        return run_pay(args, parser)
    if args.command == "quote":
        return run_quote(args)
    if args.command == "demo":
        return run_demo(args)
    return run_rubric(args, parser)


if __name__ == "__main__":
    sys.exit(main())
