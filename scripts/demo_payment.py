#!/usr/bin/env python3
"""
End-to-end payment demo against a running service.

Builds a signed payment through /api/create-payment, then replays the
envelope into /api/submit-transaction.

Usage:
    stellar-service serve --network testnet &
    python scripts/demo_payment.py --source-secret S... --destination G... --amount 10
"""

import argparse
import sys

import httpx


def run_demo(
    service_url: str,
    source_secret: str,
    destination: str,
    amount: str,
    asset_code: str = "XLM",
    asset_issuer: str = None,
) -> dict:
    """Create, then submit, a payment."""
    with httpx.Client(base_url=service_url, timeout=60.0) as client:
        payload = {
            "sourceSecret": source_secret,
            "destinationAddress": destination,
            "amount": amount,
            "assetCode": asset_code,
        }
        if asset_issuer:
            payload["assetIssuer"] = asset_issuer

        print(f"🔨 Building payment of {amount} {asset_code} to {destination[:8]}...")
        response = client.post("/api/create-payment", json=payload)
        body = response.json()
        if not body.get("success"):
            print(f"❌ create-payment failed ({response.status_code}): {body.get('error')}")
            sys.exit(1)

        signed_xdr = body["signedXDR"]
        print(f"✅ Signed envelope: {signed_xdr[:48]}...")

        print("\n📤 Submitting...")
        response = client.post("/api/submit-transaction", json={"signedXDR": signed_xdr})
        body = response.json()
        if not body.get("success"):
            print(f"❌ submit-transaction failed ({response.status_code}): {body.get('error')}")
            sys.exit(1)

        print("✅ Submitted!")
        print(f"   Transaction ID: {body['transactionId']}")
        print(f"   Ledger:         {body['ledger']}")
        print(f"   Hash:           {body['hash']}")
        return body


def main():
    parser = argparse.ArgumentParser(description="Run an end-to-end payment")
    parser.add_argument(
        "--service-url", "-u",
        default="http://localhost:3002",
        help="Base URL of the running service (default: http://localhost:3002)"
    )
    parser.add_argument("--source-secret", "-s", required=True, help="Secret seed of a funded account")
    parser.add_argument("--destination", "-d", required=True, help="Destination account id")
    parser.add_argument("--amount", "-a", default="10", help="Amount to send (default: 10)")
    parser.add_argument("--asset-code", default="XLM", help="Asset code (default: XLM)")
    parser.add_argument("--asset-issuer", help="Issuer for non-native assets")

    args = parser.parse_args()
    run_demo(
        args.service_url,
        args.source_secret,
        args.destination,
        args.amount,
        args.asset_code,
        args.asset_issuer,
    )


if __name__ == "__main__":
    main()
