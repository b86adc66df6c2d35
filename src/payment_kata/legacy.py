"""
The interview exhibit: payment processing as one monolithic class.

The candidate is asked to refactor this class. Its flaws are deliberate and
must stay in place: a hardcoded API key, three copies of the same branch,
console output instead of errors, no return value, and mutable state that
nothing guards. `payment_kata.processor` holds the model solution.
"""

import json
import time
from datetime import datetime


class LegacyPaymentProcessor:
    api_key = "sk_test_12345"  # API key for payment gateway
    log_file_path = "payment_logs.txt"

    def __init__(self):
        self.processed_transactions = []

    def process_payment(self, payment_type, amount, currency, customer_email, payment_details):
        if amount <= 0:
            print("Error: Invalid amount")
            self.write_log(f"ERROR: Invalid amount {amount} for {customer_email}")
            return

        if "@" not in customer_email:
            print("Error: Invalid email")
            self.write_log(f"ERROR: Invalid email {customer_email}")
            return

        if payment_type == "credit_card":
            if (
                "card_number" not in payment_details
                or "cvv" not in payment_details
                or "expiry" not in payment_details
            ):
                print("Error: Missing card details")
                return

            print("Processing credit card payment...")
            response = self.make_http_request(
                "https://api.cardprocessor.com/charge",
                {
                    "amount": amount,
                    "currency": currency,
                    "card_number": payment_details["card_number"],
                    "cvv": payment_details["cvv"],
                    "expiry": payment_details["expiry"],
                    "api_key": self.api_key,
                },
            )

            if response["status"] == "success":
                print("Credit card payment successful!")
                self.processed_transactions.append(f"CC-{int(time.time() * 1000)}")
                self.write_log(f"SUCCESS: Credit card payment of {amount} {currency} for {customer_email}")
                self.send_email(
                    customer_email, "Payment Successful", f"Your payment of {amount} {currency} was processed."
                )
            else:
                print("Credit card payment failed!")
                self.write_log(f"FAILED: Credit card payment of {amount} {currency} for {customer_email}")
                self.send_email(customer_email, "Payment Failed", "Your payment could not be processed.")

        elif payment_type == "paypal":
            if "paypal_email" not in payment_details:
                print("Error: Missing PayPal email")
                return

            print("Processing PayPal payment...")
            response = self.make_http_request(
                "https://api.paypal.com/payment",
                {
                    "amount": amount,
                    "currency": currency,
                    "paypal_email": payment_details["paypal_email"],
                    "api_key": self.api_key,
                },
            )

            if response["status"] == "success":
                print("PayPal payment successful!")
                self.processed_transactions.append(f"PP-{int(time.time() * 1000)}")
                self.write_log(f"SUCCESS: PayPal payment of {amount} {currency} for {customer_email}")
                self.send_email(
                    customer_email, "Payment Successful", f"Your PayPal payment of {amount} {currency} was processed."
                )
            else:
                print("PayPal payment failed!")
                self.write_log(f"FAILED: PayPal payment of {amount} {currency} for {customer_email}")
                self.send_email(customer_email, "Payment Failed", "Your PayPal payment could not be processed.")

        elif payment_type == "bank_transfer":
            if "account_number" not in payment_details or "routing_number" not in payment_details:
                print("Error: Missing bank details")
                return

            print("Processing bank transfer...")
            response = self.make_http_request(
                "https://api.bank.com/transfer",
                {
                    "amount": amount,
                    "currency": currency,
                    "account_number": payment_details["account_number"],
                    "routing_number": payment_details["routing_number"],
                    "api_key": self.api_key,
                },
            )

            if response["status"] == "success":
                print("Bank transfer successful!")
                self.processed_transactions.append(f"BT-{int(time.time() * 1000)}")
                self.write_log(f"SUCCESS: Bank transfer of {amount} {currency} for {customer_email}")
                self.send_email(
                    customer_email, "Payment Successful", f"Your bank transfer of {amount} {currency} was processed."
                )
            else:
                print("Bank transfer failed!")
                self.write_log(f"FAILED: Bank transfer of {amount} {currency} for {customer_email}")
                self.send_email(customer_email, "Payment Failed", "Your bank transfer could not be processed.")

        else:
            print("Error: Unsupported payment type")
            self.write_log(f"ERROR: Unsupported payment type {payment_type}")

    def make_http_request(self, url, data):
        print(f"Making request to {url}")
        print(f"Data: {json.dumps(data)}")

        return {"status": "success", "transaction_id": f"txn_{int(time.time() * 1000)}"}

    def write_log(self, message):
        timestamp = datetime.now().isoformat()
        with open(self.log_file_path, "a") as f:
            f.write(f"[{timestamp}] {message}\n")
        print(f"Log written: {message}")

    def send_email(self, to, subject, body):
        print(f"Sending email to {to}")
        print(f"Subject: {subject}")
        print(f"Body: {body}")
        self.write_log(f"Email sent to {to}: {subject}")

    def get_processed_transactions(self):
        return self.processed_transactions

    def calculate_fees(self, amount):
        return (amount * 0.029) + 0.30

    def apply_discount(self, amount, customer_tier):
        if customer_tier == "gold":
            return amount * 0.95  # 5% discount
        elif customer_tier == "silver":
            return amount * 0.97  # 3% discount
        elif customer_tier == "bronze":
            return amount * 0.99  # 1% discount
        return amount
